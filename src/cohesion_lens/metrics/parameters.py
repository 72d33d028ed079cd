"""Tunable method-selection parameters for metrics that accept them.

A ParameterSet decides which methods of a class a metric looks at.
Constructors, static methods and private methods are opt-in; every field left
as None falls back to DEFAULT_PARAMETERS.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Optional, Union

from ..exceptions import UnsupportedParametersError
from ..structure.models import Method


@dataclass(frozen=True)
class ParameterSet:
    """Method filters. None means "not supplied"."""

    include_ctors: Optional[bool] = None
    include_static: Optional[bool] = None
    include_private: Optional[bool] = None

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @property
    def supplied(self) -> tuple[str, ...]:
        """Names of the fields the caller actually set."""
        return tuple(name for name in self.names() if getattr(self, name) is not None)

    @property
    def is_empty(self) -> bool:
        return not self.supplied

    def resolved(self) -> ParameterSet:
        """Copy with every unset field taken from DEFAULT_PARAMETERS."""
        return ParameterSet(
            **{
                name: getattr(DEFAULT_PARAMETERS, name)
                if getattr(self, name) is None
                else getattr(self, name)
                for name in self.names()
            }
        )

    def includes(self, method: Method) -> bool:
        """Whether a metric configured with these parameters sees the method."""
        params = self.resolved()
        if method.constructor and not params.include_ctors:
            return False
        if method.static and not params.include_static:
            return False
        if method.private and not params.include_private:
            return False
        return True

    @staticmethod
    def named(value: Union[None, ParameterSet, Mapping[str, Any]]) -> tuple[str, ...]:
        """Parameter names the caller mentioned, even with a None value.

        ``{"include_ctors": None}`` still names include_ctors, while a
        ParameterSet only names the fields it sets.
        """
        if value is None:
            return ()
        if isinstance(value, ParameterSet):
            return value.supplied
        return tuple(value)

    def to_dict(self) -> dict[str, bool]:
        return {name: getattr(self, name) for name in self.supplied}

    @classmethod
    def coerce(
        cls,
        value: Union[None, ParameterSet, Mapping[str, Any]],
        metric_id: str = "",
    ) -> ParameterSet:
        """Turn None, a ParameterSet or a plain mapping into a ParameterSet.

        Raises:
            UnsupportedParametersError: For unknown names or non-boolean values.
        """
        if value is None:
            return EMPTY_PARAMETERS
        if isinstance(value, ParameterSet):
            return value
        if not isinstance(value, Mapping):
            raise UnsupportedParametersError(
                metric_id, [], f"expected a mapping, got {type(value).__name__}"
            )

        unknown = set(value) - set(cls.names())
        if unknown:
            raise UnsupportedParametersError(
                metric_id, unknown, f"known parameters are {', '.join(cls.names())}"
            )
        bad = [k for k, v in value.items() if v is not None and not isinstance(v, bool)]
        if bad:
            raise UnsupportedParametersError(metric_id, bad, "values must be true or false")
        return cls(**value)


EMPTY_PARAMETERS = ParameterSet()

# Constructors, static and private methods are left out unless asked for.
DEFAULT_PARAMETERS = ParameterSet(
    include_ctors=False,
    include_static=False,
    include_private=False,
)
