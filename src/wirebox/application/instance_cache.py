import threading
from typing import Any, Dict

from wirebox.domain import Identifier


class InstanceCache:
    """Holds the shared instances of singleton identifiers.

    Entries live for the lifetime of the container and are removed one at a
    time by unbind.

    Attributes:
        _instances: Mapping of abstract identifiers to built instances.
        _lock: Serializes writes.
    """

    def __init__(self) -> None:
        self._instances: Dict[Identifier, Any] = {}
        self._lock = threading.RLock()

    def contains(self, abstract: Identifier) -> bool:
        return abstract in self._instances

    def get(self, abstract: Identifier) -> Any:
        """Return the cached instance.

        Raises:
            KeyError: If nothing is cached for the identifier.
        """
        return self._instances[abstract]

    def store(self, abstract: Identifier, instance: Any) -> None:
        with self._lock:
            self._instances[abstract] = instance

    def remove(self, abstract: Identifier) -> None:
        with self._lock:
            self._instances.pop(abstract, None)

    def clear(self) -> None:
        """Drop every cached instance. Only test utilities reset a cache wholesale."""
        with self._lock:
            self._instances.clear()

    def __len__(self) -> int:
        return len(self._instances)
