"""Structural snapshot of one class: methods, attributes and their relations.

The snapshot is what every metric algorithm consumes:

    Attribute       a field declared by the class
    Method          a method, the attributes it uses/writes, the methods it calls
    ClassStructure  the frozen bundle of both, validated on construction

Invariants (checked in ClassStructure.__post_init__):
  - method names and attribute names are unique within the class
  - every used/written attribute is declared by the class
  - written attributes are a subset of used attributes
  - every called method is declared by the class
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Iterable

from ..exceptions import MalformedClassStructureError

if TYPE_CHECKING:
    from ..metrics.parameters import ParameterSet


@dataclass(frozen=True)
class Attribute:
    """A field of the class."""

    name: str
    type: str = "Object"
    static: bool = False


@dataclass(frozen=True)
class Method:
    """A method of the class and the relations it takes part in.

    Attributes:
        name: Identity within the class. Overloads must be disambiguated by
            the producer (e.g. ``put(int)`` vs ``put(String)``).
        uses: Attributes read or written by the method.
        writes: Attributes written by the method (subset of ``uses``).
        calls: Methods of the same class invoked by this method.
        parameters: Declared parameter types, in order.
        constructor: True for constructors.
        static: True for static methods.
        private: True for private methods.
    """

    name: str
    uses: frozenset[str] = frozenset()
    writes: frozenset[str] = frozenset()
    calls: frozenset[str] = frozenset()
    parameters: tuple[str, ...] = ()
    constructor: bool = False
    static: bool = False
    private: bool = False

    def __post_init__(self) -> None:
        # Accept any iterable from callers; store immutable collections.
        object.__setattr__(self, "uses", frozenset(self.uses))
        object.__setattr__(self, "writes", frozenset(self.writes))
        object.__setattr__(self, "calls", frozenset(self.calls))
        object.__setattr__(self, "parameters", tuple(self.parameters))


@dataclass(frozen=True)
class ClassStructure:
    """Immutable structural snapshot of one class."""

    name: str
    methods: tuple[Method, ...] = ()
    attributes: tuple[Attribute, ...] = ()
    _by_name: dict[str, Method] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "methods", tuple(self.methods))
        object.__setattr__(self, "attributes", tuple(self.attributes))
        self._validate()
        object.__setattr__(self, "_by_name", {m.name: m for m in self.methods})

    def _validate(self) -> None:
        if not self.name:
            raise MalformedClassStructureError(self.name, "class name is empty")

        attribute_names = [a.name for a in self.attributes]
        duplicates = _duplicates(attribute_names)
        if duplicates:
            raise MalformedClassStructureError(
                self.name, f"duplicate attributes: {', '.join(duplicates)}"
            )

        method_names = [m.name for m in self.methods]
        duplicates = _duplicates(method_names)
        if duplicates:
            raise MalformedClassStructureError(
                self.name, f"duplicate methods: {', '.join(duplicates)}"
            )

        declared_attributes = set(attribute_names)
        declared_methods = set(method_names)
        for method in self.methods:
            unknown = method.uses - declared_attributes
            if unknown:
                raise MalformedClassStructureError(
                    self.name,
                    f"method {method.name} uses undeclared attributes: "
                    f"{', '.join(sorted(unknown))}",
                )
            stray = method.writes - method.uses
            if stray:
                raise MalformedClassStructureError(
                    self.name,
                    f"method {method.name} writes attributes it does not use: "
                    f"{', '.join(sorted(stray))}",
                )
            unknown = method.calls - declared_methods
            if unknown:
                raise MalformedClassStructureError(
                    self.name,
                    f"method {method.name} calls undeclared methods: "
                    f"{', '.join(sorted(unknown))}",
                )

    @property
    def method_names(self) -> tuple[str, ...]:
        return tuple(m.name for m in self.methods)

    @property
    def attribute_names(self) -> tuple[str, ...]:
        return tuple(a.name for a in self.attributes)

    def method(self, name: str) -> Method:
        """Look up a method by name. Raises KeyError if absent."""
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"{self.name} has no method {name!r}") from None

    def uses_of(self, method: str) -> frozenset[str]:
        """Attributes used by the named method."""
        return self.method(method).uses

    def calls_of(self, method: str) -> frozenset[str]:
        """Methods of this class called by the named method."""
        return self.method(method).calls

    def select(self, parameters: ParameterSet) -> ClassStructure:
        """Snapshot restricted to the methods the parameter set includes.

        Calls into dropped methods are removed so the result stays valid.
        """
        kept = [m for m in self.methods if parameters.includes(m)]
        if len(kept) == len(self.methods):
            return self
        kept_names = {m.name for m in kept}
        methods = tuple(replace(m, calls=m.calls & kept_names) for m in kept)
        return ClassStructure(name=self.name, methods=methods, attributes=self.attributes)


def _duplicates(names: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    dupes: set[str] = set()
    for name in names:
        if name in seen:
            dupes.add(name)
        seen.add(name)
    return sorted(dupes)
