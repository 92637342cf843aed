from __future__ import annotations

from typing import Dict, Generic, List, TypeVar


T = TypeVar("T")


class PluginRegistry(Generic[T]):
    """Name to factory mapping; names are case-insensitive."""

    def __init__(self) -> None:
        self._factories: Dict[str, T] = {}

    @staticmethod
    def _key(name: str) -> str:
        return name.strip().lower()

    def register(self, name: str, factory: T) -> None:
        key = self._key(name)
        if key in self._factories:
            raise ValueError(f"Plugin '{key}' is already registered.")
        self._factories[key] = factory

    def get(self, name: str) -> T:
        try:
            return self._factories[self._key(name)]
        except KeyError as exc:
            available = ", ".join(self.names()) or "none"
            raise KeyError(f"Plugin '{name}' is not registered (available: {available}).") from exc

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._factories

    def names(self) -> List[str]:
        return sorted(self._factories.keys())
