"""Shared test fixtures for Cohesion Lens."""

import logging

import pytest
from rich.logging import RichHandler

from cohesion_lens.structure.models import Attribute, ClassStructure, Method


def make_class(name, methods, attributes=None):
    """Build a ClassStructure from (name, uses) pairs or Method objects.

    Attributes default to everything the methods use, sorted.
    """
    built = [m if isinstance(m, Method) else Method(m[0], uses=m[1]) for m in methods]
    if attributes is None:
        attributes = sorted({a for m in built for a in m.uses})
    return ClassStructure(
        name=name,
        methods=built,
        attributes=[a if isinstance(a, Attribute) else Attribute(a) for a in attributes],
    )


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo setup_logging(): drop its rich handlers and restore levels."""
    root = logging.getLogger()
    package = logging.getLogger("cohesion_lens")
    root_level, package_level = root.level, package.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.setLevel(root_level)
    package.setLevel(package_level)


@pytest.fixture
def class_factory():
    """make_class, for tests that build their own small classes."""
    return make_class


@pytest.fixture
def disjoint_class():
    """Two methods, two attributes, nothing shared: m1 uses a1, m2 uses a2."""
    return make_class("Disjoint", [("m1", {"a1"}), ("m2", {"a2"})])


@pytest.fixture
def shared_class():
    """Two methods, both using both attributes."""
    return make_class("Shared", [("m1", {"a1", "a2"}), ("m2", {"a1", "a2"})])


@pytest.fixture
def single_method_class():
    """One method, no attributes."""
    return ClassStructure(name="Lonely", methods=[Method("only")])


@pytest.fixture
def empty_class():
    """No methods, no attributes."""
    return ClassStructure(name="Empty")


@pytest.fixture
def chain_class():
    """m1 -a- m2 -b- m3 linked through shared attributes, m4 isolated on c."""
    return make_class(
        "Chain",
        [("m1", {"a"}), ("m2", {"a", "b"}), ("m3", {"b"}), ("m4", {"c"})],
    )


@pytest.fixture
def skewed_class():
    """Three methods, two attributes: m1 and m2 share x, m3 alone uses y."""
    return make_class("Skewed", [("m1", {"x"}), ("m2", {"x"}), ("m3", {"y"})])


@pytest.fixture
def account_class():
    """A class exercising constructors, static, private methods, calls and writes."""
    return ClassStructure(
        name="org.example.Account",
        attributes=[
            Attribute("balance", "double"),
            Attribute("owner", "String"),
            Attribute("log", "List"),
            Attribute("COUNT", "int", static=True),
        ],
        methods=[
            Method(
                "<init>",
                uses={"balance", "owner"},
                writes={"balance", "owner"},
                parameters=("String",),
                constructor=True,
            ),
            Method(
                "deposit",
                uses={"balance"},
                writes={"balance"},
                calls={"record"},
                parameters=("double",),
            ),
            Method(
                "withdraw",
                uses={"balance"},
                writes={"balance"},
                calls={"record"},
                parameters=("double",),
            ),
            Method("owner", uses={"owner"}),
            Method("record", uses={"log"}, writes={"log"}, parameters=("String",), private=True),
            Method("count", uses={"COUNT"}, static=True),
        ],
    )
