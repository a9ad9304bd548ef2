"""
Storage adapter boundary for DynamicBuffer.
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class PropertyStore(Protocol):
    """
    Key-value store limited to primitive scalar values.

    Only text values are ever written by a BufferStore; load may hand back
    whatever the store holds.
    """

    def store(self, key: str, value: Optional[Any]) -> None:
        ...

    def load(self, key: str) -> Optional[Any]:
        ...


@runtime_checkable
class DynamicPropertyHost(Protocol):
    """Host object exposing dynamic properties (entities, items, worlds, slots)."""

    def set_dynamic_property(self, identifier: str, value: Optional[Any] = None) -> None:
        ...

    def get_dynamic_property(self, identifier: str) -> Optional[Any]:
        ...


class PropertyHostAdapter:
    """Adapts a DynamicPropertyHost to the PropertyStore interface."""

    def __init__(self, host: DynamicPropertyHost):
        self.host = host

    def store(self, key: str, value: Optional[Any]) -> None:
        self.host.set_dynamic_property(key, value)

    def load(self, key: str) -> Optional[Any]:
        return self.host.get_dynamic_property(key)


def as_property_store(target: Any) -> PropertyStore:
    """
    Gets a PropertyStore for the given target.

    Args:
        target: A PropertyStore or a DynamicPropertyHost

    Returns:
        The target itself, or an adapter around it
    """
    if isinstance(target, PropertyStore):
        return target
    if isinstance(target, DynamicPropertyHost):
        return PropertyHostAdapter(target)
    raise TypeError(
        f"Invalid target: {type(target).__name__} implements neither store/load "
        "nor set_dynamic_property/get_dynamic_property"
    )
