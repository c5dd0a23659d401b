"""
Named per-day attributes.

Each attribute function takes a DayInfo and returns a dict of the fields
it contributes; day_info(..., attributes=[...]) merges them in the order
requested.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Sequence

from ..core.types import DayInfo

AttrFunc = Callable[[DayInfo], Dict[str, Any]]
_REGISTRY: Dict[str, AttrFunc] = {}


def register_attribute(name: str, fn: AttrFunc) -> None:
    if name in _REGISTRY and _REGISTRY[name] is not fn:
        raise ValueError(f"attribute {name!r} is already registered")
    _REGISTRY[name] = fn


def available_attributes() -> List[str]:
    return sorted(_REGISTRY)


def compute_attributes(info: DayInfo, names: Sequence[str]) -> Dict[str, Any]:
    fields: Dict[str, Any] = {}
    for name in names:
        fn = _REGISTRY.get(name)
        if fn is None:
            raise KeyError(f"unknown attribute {name!r}; available: {', '.join(available_attributes())}")
        fields.update(fn(info))
    return fields
