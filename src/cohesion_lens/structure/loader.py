"""Load class skeletons from JSON into ClassStructure snapshots.

Skeleton format:

    {"classes": [
        {"name": "org.example.Cart",
         "attributes": [{"name": "items", "type": "List", "static": false}],
         "methods": [
            {"name": "add", "uses": ["items"], "writes": ["items"],
             "calls": [], "parameters": ["Item"],
             "constructor": false, "static": false, "private": false}
         ]}
    ]}

A top-level list of class objects is accepted as well. Only ``name`` is
required on classes, attributes and methods; everything else defaults to empty.
Class names must be unique within a file; later repeats are rejected.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from ..exceptions import MalformedClassStructureError, SkeletonFileError
from ..logging_config import get_logger
from .models import Attribute, ClassStructure, Method

logger = get_logger(__name__)


@dataclass
class LoadResult:
    """Classes decoded from a skeleton file plus the ones that were rejected."""

    structures: list[ClassStructure] = field(default_factory=list)
    errors: list[MalformedClassStructureError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def structure_from_dict(data: Mapping[str, Any]) -> ClassStructure:
    """Build a validated ClassStructure from one decoded class object.

    Raises:
        MalformedClassStructureError: On missing or ill-typed fields, or when
            the decoded class violates the snapshot invariants.
    """
    if not isinstance(data, Mapping):
        raise MalformedClassStructureError("", f"expected an object, got {type(data).__name__}")

    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise MalformedClassStructureError("", "class is missing a string 'name'")

    attributes = tuple(
        _attribute(name, raw) for raw in _list_field(name, data, "attributes")
    )
    methods = tuple(_method(name, raw) for raw in _list_field(name, data, "methods"))
    return ClassStructure(name=name, methods=methods, attributes=attributes)


def load_structures(path: Path) -> LoadResult:
    """Read a skeleton file, skipping (and recording) malformed classes.

    Raises:
        SkeletonFileError: If the file cannot be read, is not valid JSON, or
            does not contain a list of classes.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise SkeletonFileError(path, str(e)) from e

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise SkeletonFileError(path, f"invalid JSON: {e}") from e

    classes = document.get("classes") if isinstance(document, dict) else document
    if not isinstance(classes, list):
        raise SkeletonFileError(path, "expected a 'classes' list")

    result = LoadResult()
    names: set[str] = set()
    for raw in classes:
        try:
            structure = structure_from_dict(raw)
            if structure.name in names:
                raise MalformedClassStructureError(
                    structure.name, "class name appears more than once in the file"
                )
            names.add(structure.name)
            result.structures.append(structure)
        except MalformedClassStructureError as e:
            logger.warning("Skipping class: %s", e)
            result.errors.append(e)

    logger.debug(
        "Loaded %d classes from %s (%d rejected)",
        len(result.structures),
        path,
        len(result.errors),
    )
    return result


def _attribute(class_name: str, raw: Any) -> Attribute:
    if not isinstance(raw, Mapping):
        raise MalformedClassStructureError(class_name, "attribute entries must be objects")
    return Attribute(
        name=_required_str(class_name, raw, "attribute"),
        type=_optional_str(class_name, raw, "type", "Object"),
        static=_flag(class_name, raw, "static"),
    )


def _method(class_name: str, raw: Any) -> Method:
    if not isinstance(raw, Mapping):
        raise MalformedClassStructureError(class_name, "method entries must be objects")
    return Method(
        name=_required_str(class_name, raw, "method"),
        uses=_str_list(class_name, raw, "uses"),
        writes=_str_list(class_name, raw, "writes"),
        calls=_str_list(class_name, raw, "calls"),
        parameters=_str_list(class_name, raw, "parameters"),
        constructor=_flag(class_name, raw, "constructor"),
        static=_flag(class_name, raw, "static"),
        private=_flag(class_name, raw, "private"),
    )


def _list_field(class_name: str, data: Mapping[str, Any], key: str) -> list:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise MalformedClassStructureError(class_name, f"'{key}' must be a list")
    return value


def _required_str(class_name: str, raw: Mapping[str, Any], kind: str) -> str:
    value = raw.get("name")
    if not isinstance(value, str) or not value:
        raise MalformedClassStructureError(class_name, f"{kind} is missing a string 'name'")
    return value


def _optional_str(class_name: str, raw: Mapping[str, Any], key: str, default: str) -> str:
    value = raw.get(key, default)
    if not isinstance(value, str):
        raise MalformedClassStructureError(class_name, f"'{key}' must be a string")
    return value


def _str_list(class_name: str, raw: Mapping[str, Any], key: str) -> tuple[str, ...]:
    value = raw.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise MalformedClassStructureError(
            class_name, f"'{key}' of {raw.get('name')!r} must be a list of strings"
        )
    return tuple(value)


def _flag(class_name: str, raw: Mapping[str, Any], key: str) -> bool:
    value = raw.get(key, False)
    if not isinstance(value, bool):
        raise MalformedClassStructureError(
            class_name, f"'{key}' of {raw.get('name')!r} must be true or false"
        )
    return value
