"""Registry mapping standard names to dialect standards."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Protocol

from feedio.config import validate_standard_name

if TYPE_CHECKING:
    from feedio.standards.protocols import Standard


class NotFoundError(LookupError):
    """Raised when no standard is registered under the requested name."""

    def __init__(self, name: str) -> None:
        """Initialize the error.

        Args:
            name: The requested standard name, as given by the caller
        """
        self.name = name
        super().__init__(f"No standard found for '{name}'")


class StandardObserver(Protocol):
    """Receives registry changes (e.g. the reader building its parsers)."""

    def standard_added(self, name: str, standard: Standard) -> None:
        ...

    def standard_removed(self, name: str) -> None:
        ...


class StandardRegistry:
    """Registry mapping case-insensitive names to standards.

    Observers subscribed to the registry are told about every change, so
    a standard is either registered and parseable, or not registered at
    all: when an observer fails, the registration is rolled back.
    """

    def __init__(self, logger: logging.Logger) -> None:
        """Initialize an empty registry.

        Args:
            logger: Logger for registration events
        """
        self._standards: dict[str, Standard] = {}
        self._observers: list[StandardObserver] = []
        self._lock = threading.RLock()
        self._logger = logger

    def subscribe(self, observer: StandardObserver) -> None:
        """Subscribe an observer and replay the standards registered so far."""
        with self._lock:
            for name, standard in self._standards.items():
                observer.standard_added(name, standard)
            self._observers.append(observer)

    def add(self, name: str, standard: Standard) -> StandardRegistry:
        """Register a standard. An existing standard with that name is replaced.

        Args:
            name: Standard name, matched case-insensitively
            standard: The dialect standard

        Returns:
            The registry itself, for chaining

        Raises:
            ValueError: If the name is empty
        """
        validate_standard_name(name)
        key = name.lower()
        with self._lock:
            previous = self._standards.get(key)
            if previous is not None:
                self._logger.debug("replacing standard %s (%s)", key, type(previous).__name__)
            self._standards[key] = standard
            self._notify(key, standard, previous)
        return self

    def remove(self, name: str) -> Standard:
        """Unregister a standard and return it.

        Raises:
            NotFoundError: If no standard is registered under that name
        """
        key = name.lower()
        with self._lock:
            if key not in self._standards:
                raise NotFoundError(name)
            standard = self._standards.pop(key)
            for observer in self._observers:
                observer.standard_removed(key)
        return standard

    def get(self, name: str) -> Standard:
        """Return the standard registered under ``name``.

        Raises:
            NotFoundError: If no standard is registered under that name
        """
        key = name.lower()
        with self._lock:
            if key in self._standards:
                return self._standards[key]
        raise NotFoundError(name)

    def has(self, name: str) -> bool:
        with self._lock:
            return name.lower() in self._standards

    def names(self) -> list[str]:
        """Return registered names in registration order."""
        with self._lock:
            return list(self._standards.keys())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def _notify(self, key: str, standard: Standard, previous: Standard | None) -> None:
        notified: list[StandardObserver] = []
        try:
            for observer in self._observers:
                observer.standard_added(key, standard)
                notified.append(observer)
        except Exception:
            # Undo the registration everywhere before propagating
            for observer in notified:
                if previous is not None:
                    observer.standard_added(key, previous)
                else:
                    observer.standard_removed(key)
            if previous is not None:
                self._standards[key] = previous
            else:
                del self._standards[key]
            raise
