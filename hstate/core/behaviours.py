# hstate/core/behaviours.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Trigger behaviours: the decision objects a state holds for each trigger.

A behaviour answers one question: does firing its trigger from a given source
state, with the given arguments, result in a transition, and if so to which
destination? The set of variants is closed:

- UnconditionalTriggerBehaviour: always transitions to a fixed destination.
- GuardedTriggerBehaviour: transitions to a fixed destination when its guard passes.
- IgnoredTriggerBehaviour: never transitions; firing is a silent no-op.
- ReentryTriggerBehaviour: transitions back into the source state.
- DynamicTriggerBehaviour: the destination is computed from the trigger arguments.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Callable, Optional, Tuple

from hstate.core.actions import accepts_arguments
from hstate.core.guards import NO_GUARD, _GuardAdapter


class BehaviourKind(Enum):
    """Tags the variant of a trigger behaviour."""

    UNCONDITIONAL = auto()  # permit
    GUARDED = auto()  # permit_if
    IGNORED = auto()  # ignore / ignore_if
    REENTRY = auto()  # permit_reentry / permit_reentry_if
    DYNAMIC = auto()  # permit_dynamic / permit_dynamic_if


class TriggerBehaviour:
    """
    Common contract of all trigger behaviours.
    """

    kind: BehaviourKind

    def __init__(
        self,
        trigger: Any,
        guard: Optional[_GuardAdapter] = None,
        action: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        :param trigger: The trigger this behaviour responds to.
        :param guard: Guard evaluated over the trigger arguments.
        :param action: Optional user action run between exit and entry.
        """
        if action is not None and not callable(action):
            raise TypeError(f"Action {action!r} is not callable")
        self._trigger = trigger
        self._guard = guard or NO_GUARD
        self._action = action

    @property
    def trigger(self) -> Any:
        return self._trigger

    @property
    def action(self) -> Optional[Callable[..., None]]:
        return self._action

    @property
    def transitions(self) -> bool:
        """Whether an active behaviour of this kind changes state."""
        return True

    def is_guard_condition_met(self, args: Optional[Tuple[Any, ...]] = None) -> bool:
        """
        Evaluate the guard.

        :param args: Trigger arguments, or None when they are not known.
        """
        return self._guard.check(args)

    def results_in_transition_from(self, source: Any, args: Tuple[Any, ...]) -> Tuple[bool, Any]:
        """
        Decide the outcome of firing from ``source``. The guard is not evaluated
        here; callers resolve the behaviour first.

        :return: ``(True, destination)`` for a transition, ``(False, None)`` otherwise.
        """
        raise NotImplementedError()

    def perform_action(self, args: Tuple[Any, ...]) -> None:
        """Run the user action, if any. Simple behaviours take no arguments."""
        if self._action is not None:
            self._action()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(trigger={self._trigger!r})"


class UnconditionalTriggerBehaviour(TriggerBehaviour):
    kind = BehaviourKind.UNCONDITIONAL

    def __init__(self, trigger: Any, destination: Any, action: Optional[Callable[..., None]] = None) -> None:
        super().__init__(trigger, NO_GUARD, action)
        self._destination = destination

    @property
    def destination(self) -> Any:
        return self._destination

    def results_in_transition_from(self, source: Any, args: Tuple[Any, ...]) -> Tuple[bool, Any]:
        return True, self._destination


class GuardedTriggerBehaviour(UnconditionalTriggerBehaviour):
    kind = BehaviourKind.GUARDED

    def __init__(
        self,
        trigger: Any,
        destination: Any,
        guard: _GuardAdapter,
        action: Optional[Callable[..., None]] = None,
    ) -> None:
        super().__init__(trigger, destination, action)
        self._guard = guard


class IgnoredTriggerBehaviour(TriggerBehaviour):
    kind = BehaviourKind.IGNORED

    def __init__(self, trigger: Any, guard: Optional[_GuardAdapter] = None) -> None:
        super().__init__(trigger, guard)

    @property
    def transitions(self) -> bool:
        return False

    def results_in_transition_from(self, source: Any, args: Tuple[Any, ...]) -> Tuple[bool, Any]:
        return False, None


class ReentryTriggerBehaviour(TriggerBehaviour):
    """
    Transitions from a state back into itself, running its exit and entry actions.

    Inherited by a substate, the behaviour leads from the substate up to the
    declaring state, which is then neither exited nor entered.
    """

    kind = BehaviourKind.REENTRY

    def __init__(
        self,
        trigger: Any,
        destination: Any,
        guard: Optional[_GuardAdapter] = None,
        action: Optional[Callable[..., None]] = None,
    ) -> None:
        super().__init__(trigger, guard, action)
        self._destination = destination

    @property
    def destination(self) -> Any:
        return self._destination

    def results_in_transition_from(self, source: Any, args: Tuple[Any, ...]) -> Tuple[bool, Any]:
        return True, self._destination


class DynamicTriggerBehaviour(TriggerBehaviour):
    """
    Computes the destination from the trigger arguments at fire time. The
    selector is called exactly once per fire and its result is always used.
    """

    kind = BehaviourKind.DYNAMIC

    def __init__(
        self,
        trigger: Any,
        selector: Callable[..., Any],
        guard: Optional[_GuardAdapter] = None,
        action: Optional[Callable[..., None]] = None,
    ) -> None:
        if not callable(selector):
            raise TypeError(f"Destination selector {selector!r} is not callable")
        super().__init__(trigger, guard, action)
        self._selector = selector
        self._selector_takes_args = accepts_arguments(selector)
        self._action_takes_args = action is not None and accepts_arguments(action)

    def results_in_transition_from(self, source: Any, args: Tuple[Any, ...]) -> Tuple[bool, Any]:
        if self._selector_takes_args:
            return True, self._selector(*args)
        return True, self._selector()

    def perform_action(self, args: Tuple[Any, ...]) -> None:
        if self._action is None:
            return
        if self._action_takes_args:
            self._action(*args)
        else:
            self._action()
