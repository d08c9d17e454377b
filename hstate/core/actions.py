# hstate/core/actions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import inspect
from typing import Any, Callable, Optional, Tuple

from hstate.core.transitions import Transition

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


def _signature(fn: Callable[..., Any]) -> Optional[inspect.Signature]:
    try:
        return inspect.signature(fn)
    except (TypeError, ValueError):
        # Some builtins expose no signature.
        return None


def accepts_arguments(fn: Callable[..., Any]) -> bool:
    """
    Return True if ``fn`` can take at least one positional argument.

    Callables whose signature cannot be inspected are assumed to accept arguments.
    """
    signature = _signature(fn)
    if signature is None:
        return True
    return any(p.kind in _POSITIONAL for p in signature.parameters.values())


class _ActionAdapter:
    """
    Internal adapter that wraps a user-defined callable so that it can be invoked
    uniformly with a Transition. Callables that take no arguments are called bare.
    """

    def __init__(self, action_fn: Callable[..., None]) -> None:
        """
        Wrap an action function for consistent execution.
        :param action_fn: Function that takes either nothing or a Transition.
        """
        if not callable(action_fn):
            raise TypeError(f"Action {action_fn!r} is not callable")
        self._action_fn = action_fn
        self._wants_transition = accepts_arguments(action_fn)

    def run(self, transition: Transition) -> None:
        """
        Execute the action for the given transition.

        :param transition: The transition being taken.
        """
        if self._wants_transition:
            self._action_fn(transition)
        else:
            self._action_fn()


class EntryAction:
    """
    An entry action of a state, optionally restricted to transitions caused by
    a single trigger.
    """

    def __init__(
        self,
        action_fn: Callable[..., None],
        trigger: Optional[Any] = None,
        with_trigger_args: bool = False,
    ) -> None:
        """
        :param action_fn: The user callable.
        :param trigger: Only run when the transition was caused by this trigger.
        :param with_trigger_args: Call ``action_fn(*args)`` with the trigger
            arguments instead of passing the Transition.
        """
        self._adapter = _ActionAdapter(action_fn)
        self._action_fn = action_fn
        self._trigger = trigger
        self._with_trigger_args = with_trigger_args

    @property
    def trigger(self) -> Optional[Any]:
        return self._trigger

    def matches(self, transition: Transition) -> bool:
        return self._trigger is None or transition.trigger == self._trigger

    def execute(self, transition: Transition, args: Tuple[Any, ...] = ()) -> None:
        if not self.matches(transition):
            return
        if self._with_trigger_args:
            self._action_fn(*args)
        else:
            self._adapter.run(transition)


class ExitAction:
    """
    An exit action of a state. Filtering by trigger or destination is done by
    wrapping the callable with one of the ``when_*`` helpers.
    """

    def __init__(self, action_fn: Callable[..., None]) -> None:
        self._adapter = _ActionAdapter(action_fn)

    def execute(self, transition: Transition) -> None:
        self._adapter.run(transition)


def when_triggered_by(trigger: Any, action: Callable[..., None]) -> Callable[[Transition], None]:
    """
    Only execute ``action`` when a transition is caused by ``trigger``.

    Useful with ``on_exit``::

        config.configure(State.ACCEPTED) \\
            .on_exit(when_triggered_by(Trigger.CALLER_HUNG_UP, raise_caller_hung_up)) \\
            .on_exit(when_triggered_by(Trigger.OPERATOR_HUNG_UP, raise_operator_hung_up))
    """
    adapter = _ActionAdapter(action)

    def _filtered(transition: Transition) -> None:
        if transition.trigger == trigger:
            adapter.run(transition)

    return _filtered


def when_not_triggered_by(trigger: Any, action: Callable[..., None]) -> Callable[[Transition], None]:
    """Only execute ``action`` when a transition is NOT caused by ``trigger``."""
    adapter = _ActionAdapter(action)

    def _filtered(transition: Transition) -> None:
        if transition.trigger != trigger:
            adapter.run(transition)

    return _filtered


def when_transitioning_to(destination: Any, action: Callable[..., None]) -> Callable[[Transition], None]:
    """Only execute ``action`` when a transition is heading towards ``destination``."""
    adapter = _ActionAdapter(action)

    def _filtered(transition: Transition) -> None:
        if transition.destination == destination:
            adapter.run(transition)

    return _filtered
