"""Storage protocol for the override configuration."""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from termcal.errors import StorageCapabilityError


@runtime_checkable
class Store(Protocol):
    """Protocol for a single mutable slot holding the configuration blob.

    The blob is a mapping with optional ``"holidays"`` and ``"work_days"``
    keys, each an override specification.
    """

    def get(self) -> Mapping[str, Any] | None:
        """Return the stored configuration, or None if nothing is stored."""
        ...

    def set(self, value: Mapping[str, Any]) -> None:
        """Replace the stored configuration."""
        ...


def copy_config(value: Mapping[str, Any]) -> dict[str, Any]:
    """Copy a configuration blob down to its per-key override mappings."""
    return {
        key: dict(spec) if isinstance(spec, Mapping) else spec
        for key, spec in value.items()
    }


class MemoryStore:
    """In-process store. Lost when the process exits."""

    def __init__(self, value: Mapping[str, Any] | None = None) -> None:
        self._value = copy_config(value) if value is not None else None

    def get(self) -> Mapping[str, Any] | None:
        return copy_config(self._value) if self._value is not None else None

    def set(self, value: Mapping[str, Any]) -> None:
        self._value = copy_config(value)

    def __repr__(self) -> str:
        return f"MemoryStore({self._value!r})"


def probe_store(store: Any) -> None:
    """Check that ``store`` honours the Store contract.

    Raises:
        StorageCapabilityError: If get/set are missing, ``get()`` fails,
            or it returns something other than None or a mapping.
    """
    if not isinstance(store, Store) or not callable(store.set):
        raise StorageCapabilityError(
            f"{type(store).__name__} does not provide get() and set()"
        )
    try:
        value = store.get()
    except Exception as e:
        raise StorageCapabilityError(
            f"{type(store).__name__}.get() failed: {e}"
        ) from e
    if value is not None and not isinstance(value, Mapping):
        raise StorageCapabilityError(
            f"{type(store).__name__}.get() returned {type(value).__name__}, "
            "expected a mapping"
        )
