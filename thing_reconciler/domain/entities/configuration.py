"""
Domain Entities - Configuration

Thing and channel configuration: a string keyed mapping whose values are
normalised so that equality does not depend on the numeric type or the
collection type a caller happened to use.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Iterator, Mapping, Optional

from .errors import InvalidConfigurationValueError


def normalize_value(key: str, value: Any) -> Any:
    """Normalise a single configuration value.

    ``bool``, ``str``, ``Decimal`` and ``None`` are kept, other numbers become
    ``Decimal`` and lists, tuples and sets become lists of normalised values.

    Raises:
        InvalidConfigurationValueError: For any other type.
    """
    if value is None or isinstance(value, (bool, str, Decimal)):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, (list, tuple, set, frozenset)):
        return [normalize_value(key, item) for item in value]
    raise InvalidConfigurationValueError(key, value)


def _typed(value: Any) -> Any:
    # True == Decimal(1), so the type takes part in the comparison
    if isinstance(value, list):
        return (list, tuple(_typed(item) for item in value))
    return (type(value), value)


class Configuration:
    """Normalised configuration of a thing or channel.

    Two configurations are equal when they hold the same keys with values of
    the same type and equal value; key order is irrelevant.
    """

    __slots__ = ("_properties",)

    def __init__(self, properties: Optional[Mapping[str, Any]] = None):
        self._properties: Dict[str, Any] = {
            key: normalize_value(key, value)
            for key, value in (properties or {}).items()
        }

    def get(self, key: str, default: Any = None) -> Any:
        return self._properties.get(key, default)

    def contains_key(self, key: str) -> bool:
        return key in self._properties

    def keys(self):
        return self._properties.keys()

    def values(self):
        return self._properties.values()

    def items(self):
        return self._properties.items()

    def as_dict(self) -> Dict[str, Any]:
        """Return a shallow copy of the normalised properties."""
        return dict(self._properties)

    def __getitem__(self, key: str) -> Any:
        return self._properties[key]

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def _typed_properties(self) -> Dict[str, Any]:
        return {key: _typed(value) for key, value in self._properties.items()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._typed_properties() == other._typed_properties()

    def __hash__(self) -> int:
        return hash(frozenset(self._properties))

    def __repr__(self) -> str:
        return f"Configuration({self._properties!r})"
