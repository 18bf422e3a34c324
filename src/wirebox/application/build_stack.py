"""Application layer - Tracking of types under construction."""

import threading
from typing import Any, List

from wirebox.domain import CircularDependencyError


class BuildStack:
    """Tracks the chain of types currently being built.

    Uses thread-local storage so that every thread resolving from the same
    container gets its own stack. The contents feed the diagnostics of
    NotInstantiable errors and, when enabled, cycle detection.

    Attributes:
        _local: Thread-local storage for build stacks.
        _detect_cycles: Whether pushing a type already on the stack raises.
    """

    def __init__(self, detect_cycles: bool = True) -> None:
        self._local = threading.local()
        self._detect_cycles = detect_cycles

    def _get_stack(self) -> List[Any]:
        if not hasattr(self._local, "stack"):
            self._local.stack = []
        return self._local.stack

    def push(self, concrete: Any) -> None:
        """Add a type to the stack.

        Args:
            concrete: The type about to be built.

        Raises:
            CircularDependencyError: If cycle detection is on and the type is already on the stack.

        Example:
            >>> stack = BuildStack()
            >>> stack.push(ServiceA)
            >>> stack.push(ServiceB)
            >>> stack.push(ServiceA)  # Raises CircularDependencyError
        """
        stack = self._get_stack()

        if self._detect_cycles and concrete in stack:
            cycle = stack[stack.index(concrete) :] + [concrete]
            raise CircularDependencyError(cycle)

        stack.append(concrete)

    def pop(self) -> None:
        """Remove the most recently pushed type."""
        stack = self._get_stack()
        if stack:
            stack.pop()

    def snapshot(self) -> List[Any]:
        """Return a copy of the current thread's stack, outermost first."""
        return list(self._get_stack())

    @property
    def depth(self) -> int:
        return len(self._get_stack())
