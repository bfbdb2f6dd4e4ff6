from abc import ABC, abstractmethod


class BaseKeyValueStore(ABC):
    """Contract for the device-level persistent key/value cache."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value under key, overwriting any previous one."""
