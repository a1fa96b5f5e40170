"""
Cache clé -> {value, timestamp} avec TTL explicite.

Injecté dans le convertisseur de devise: l'horloge est un paramètre,
ce qui rend le comportement TTL/fallback testable sans attendre ni réseau.
"""
import time
from typing import Any, Callable, Dict, Optional


class TTLCache:
    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Dict[str, Any]] = {}

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = {"value": value, "timestamp": self._clock()}

    def get_entry(self, key: str) -> Optional[Dict[str, Any]]:
        return self._entries.get(key)

    def is_fresh(self, key: str) -> bool:
        entry = self._entries.get(key)
        if entry is None:
            return False
        return (self._clock() - entry["timestamp"]) < self.ttl_seconds

    def get(self, key: str) -> Optional[Any]:
        """Valeur si encore fraîche, sinon None."""
        if not self.is_fresh(key):
            return None
        return self._entries[key]["value"]

    def get_stale(self, key: str) -> Optional[Any]:
        """Dernière valeur connue, même expirée."""
        entry = self._entries.get(key)
        return entry["value"] if entry else None

    def clear(self) -> None:
        self._entries.clear()
