import logging
import threading
from typing import Dict, Optional

from wirebox.domain import Alias, Binding, ConstructionStrategy, Identifier

logger = logging.getLogger(__name__)


class BindingRegistry:
    """Stores one binding per normalized abstract identifier.

    Later bindings for the same identifier replace earlier ones. Resolvability
    of the bound strategy is not checked here; that happens at build time.

    Attributes:
        _bindings: Mapping of abstract identifiers to their bindings.
        _lock: Serializes writes.
    """

    def __init__(self) -> None:
        self._bindings: Dict[Identifier, Binding] = {}
        self._lock = threading.RLock()

    def bind(self, binding: Binding) -> None:
        """Store a binding, replacing any existing one for the same identifier.

        Args:
            binding: The binding to store.
        """
        with self._lock:
            replaced = binding.abstract in self._bindings
            self._bindings[binding.abstract] = binding
        logger.debug(
            "%s binding for %r (singleton=%s)",
            "Replaced" if replaced else "Added",
            binding.abstract,
            binding.singleton,
        )

    def unbind(self, abstract: Identifier) -> None:
        """Remove the binding for an identifier. Removing an absent one is a no-op."""
        with self._lock:
            self._bindings.pop(abstract, None)

    def has_binding(self, abstract: Identifier) -> bool:
        return abstract in self._bindings

    def get(self, abstract: Identifier) -> Optional[Binding]:
        return self._bindings.get(abstract)

    def get_concrete(self, abstract: Identifier) -> ConstructionStrategy:
        """Return the bound strategy, or an alias to the identifier itself when unbound.

        Args:
            abstract: The normalized identifier.

        Returns:
            The construction strategy to use for the identifier.
        """
        binding = self._bindings.get(abstract)
        if binding is None:
            return Alias(target=abstract)
        return binding.strategy

    def copy(self) -> Dict[Identifier, Binding]:
        """Get a shallow copy of the bindings."""
        with self._lock:
            return dict(self._bindings)

    def replace_all(self, bindings: Dict[Identifier, Binding]) -> None:
        """Replace every binding at once."""
        with self._lock:
            self._bindings = dict(bindings)

    def __len__(self) -> int:
        return len(self._bindings)
