"""Core value types shared by the registry, resolver and script renderer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Tuple, Union

from critical_assets.errors import UnsupportedScope


DEFAULT_CATEGORY = "uncategorized"


class Scope(str, Enum):
    """Delivery timing class of an asset."""

    CRITICAL = "critical"
    ASYNC = "async"

    @classmethod
    def parse(cls, value: Any) -> "Scope":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedScope(value) from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PlainSource:
    """Script entry registered as a bare source URL."""

    src: str

    @property
    def key(self) -> Tuple[Any, ...]:
        return ("plain", self.src)


@dataclass(frozen=True)
class AttributedSource:
    """Script entry carrying HTML attributes, ``src`` among them.

    Attributes keep the order they were given in so rendered tags are stable.
    """

    attributes: Tuple[Tuple[str, Union[str, bool, int, float]], ...]

    @classmethod
    def from_mapping(cls, attributes: Mapping[str, Any]) -> "AttributedSource":
        if "src" not in attributes:
            raise ValueError(f"Script entry is missing a 'src' attribute: {dict(attributes)!r}")
        return cls(tuple((str(key), value) for key, value in attributes.items()))

    @property
    def src(self) -> str:
        return str(dict(self.attributes)["src"])

    @property
    def key(self) -> Tuple[Any, ...]:
        """Comparison key that tells ``True`` apart from ``1``, as rendering does."""
        return ("attributed", tuple((name, type(value), value) for name, value in self.attributes))


ScriptEntry = Union[PlainSource, AttributedSource]


def coerce_script_entry(script: Any) -> ScriptEntry:
    """Turn a caller-supplied script (URL string or attribute mapping) into an entry."""
    if isinstance(script, (PlainSource, AttributedSource)):
        return script
    if isinstance(script, str):
        return PlainSource(script)
    if isinstance(script, Mapping):
        return AttributedSource.from_mapping(script)
    raise TypeError(f"Unsupported script entry type: {type(script).__name__}")
