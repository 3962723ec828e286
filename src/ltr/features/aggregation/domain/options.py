"""
Summary: Typed configuration record for the aggregation pipeline.
Why: Resolve long and short option spellings and reject unknown names.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, ClassVar, final

from ltr.shared.errors import UnknownOption


@final
@dataclass(frozen=True, slots=True)
class AggregationOptions:
    """Flags controlling folding, counting, ordering, and the locale."""

    unique: bool = False
    ignore_case: bool = False
    ignore_accents: bool = False
    count: bool = False
    sort: bool = False
    reverse: bool = False
    locale: str | None = None

    SHORT_FLAGS: ClassVar[dict[str, str]] = {
        "u": "unique",
        "i": "ignore_case",
        "I": "ignore_accents",
        "c": "count",
        "s": "sort",
        "r": "reverse",
        "l": "locale",
    }

    _CAMEL_BOUNDARY: ClassVar[re.Pattern[str]] = re.compile(r"(?<=[a-z])(?=[A-Z])")

    @classmethod
    def field_for(cls, name: str) -> str:
        """Return the field an option spelling refers to.

        Accepts ``-u``, ``u``, ``--ignore-case``, ``ignore_case`` and
        ``ignoreCase``. Short names are case-sensitive (``-i`` vs ``-I``).

        Raises:
            UnknownOption: If the spelling names no option.
        """
        stripped = name.lstrip("-")
        if len(stripped) == 1:
            if stripped in cls.SHORT_FLAGS:
                return cls.SHORT_FLAGS[stripped]
            raise UnknownOption(name)

        normalized = cls._CAMEL_BOUNDARY.sub("_", stripped).replace("-", "_").lower()
        if normalized in {f.name for f in fields(cls)}:
            return normalized
        raise UnknownOption(name)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "AggregationOptions":
        """Build options from a mapping of option spellings to values.

        Boolean flags given under several spellings are combined; a flag is
        set when any spelling sets it. ``None`` values are ignored.

        Raises:
            UnknownOption: If a key names no option.
            TypeError: If a value has the wrong type.
            ValueError: If two spellings give different locales.
        """
        resolved: dict[str, Any] = {}
        for key, value in options.items():
            name = cls.field_for(key)
            if value is None:
                continue
            if name == "locale":
                if not isinstance(value, str):
                    raise TypeError(f"Option {key!r} expects a string, got {type(value).__name__}")
                previous = resolved.get("locale")
                if previous is not None and previous != value:
                    raise ValueError(f"Conflicting locales: {previous!r} and {value!r}")
                resolved["locale"] = value
                continue
            if not isinstance(value, bool):
                raise TypeError(f"Option {key!r} expects a boolean, got {type(value).__name__}")
            resolved[name] = resolved.get(name, False) or value

        return cls(**resolved)

    @property
    def sorts_lexically(self) -> bool:
        """Lexical sorting only applies while counting is disabled."""
        return self.sort and not self.count


__all__ = ["AggregationOptions"]
