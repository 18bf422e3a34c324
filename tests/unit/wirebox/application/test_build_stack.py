"""Unit tests for BuildStack."""

import threading

import pytest

from wirebox.application.build_stack import BuildStack
from wirebox.domain import CircularDependencyError


class ServiceA:
    pass


class ServiceB:
    pass


class ServiceC:
    pass


class TestBuildStack:
    """Test cases for BuildStack."""

    def test_stack_starts_empty(self):
        stack = BuildStack()
        assert stack.depth == 0
        assert stack.snapshot() == []

    def test_push_and_pop(self):
        stack = BuildStack()

        stack.push(ServiceA)
        stack.push(ServiceB)
        assert stack.snapshot() == [ServiceA, ServiceB]

        stack.pop()
        assert stack.snapshot() == [ServiceA]

        stack.pop()
        assert stack.depth == 0

    def test_pop_empty_stack_is_noop(self):
        stack = BuildStack()
        stack.pop()
        assert stack.depth == 0

    def test_snapshot_is_a_copy(self):
        stack = BuildStack()
        stack.push(ServiceA)

        snapshot = stack.snapshot()
        snapshot.append(ServiceB)

        assert stack.snapshot() == [ServiceA]

    def test_push_detects_cycle(self):
        """Test that pushing a type already on the stack raises with the cycle path."""
        stack = BuildStack()
        stack.push(ServiceA)
        stack.push(ServiceB)
        stack.push(ServiceC)

        with pytest.raises(CircularDependencyError) as exc_info:
            stack.push(ServiceB)

        assert exc_info.value.chain == [ServiceB, ServiceC, ServiceB]
        assert stack.snapshot() == [ServiceA, ServiceB, ServiceC]

    def test_cycle_detection_can_be_disabled(self):
        """Test that the stack only records when cycle detection is off."""
        stack = BuildStack(detect_cycles=False)
        stack.push(ServiceA)
        stack.push(ServiceA)

        assert stack.snapshot() == [ServiceA, ServiceA]

    def test_stacks_are_thread_local(self):
        """Test that each thread sees its own stack."""
        stack = BuildStack()
        stack.push(ServiceA)
        seen = []

        def worker():
            seen.append(stack.snapshot())
            stack.push(ServiceB)
            seen.append(stack.snapshot())

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        assert seen == [[], [ServiceB]]
        assert stack.snapshot() == [ServiceA]
