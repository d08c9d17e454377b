# hstate/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from hstate.core.actions import EntryAction, ExitAction
from hstate.core.behaviours import TriggerBehaviour
from hstate.core.transitions import Transition


class StateRepresentation:
    """
    The node of the state hierarchy for one state value. Holds the trigger
    behaviours, entry and exit actions configured for the state, a reference to
    its superstate and back-references to its direct substates.

    Triggers that a state does not handle itself are resolved by its superstate,
    so substates inherit the behaviours of their ancestors.
    """

    def __init__(self, state: Any) -> None:
        """
        :param state: The state value this node represents.
        """
        self._state = state
        self._entry_actions: List[EntryAction] = []
        self._exit_actions: List[ExitAction] = []
        self._trigger_behaviours: Dict[Any, List[TriggerBehaviour]] = {}
        self._superstate: Optional[StateRepresentation] = None
        self._substates: List[StateRepresentation] = []

    @property
    def underlying_state(self) -> Any:
        """The state value represented."""
        return self._state

    @property
    def superstate(self) -> Optional[StateRepresentation]:
        return self._superstate

    @superstate.setter
    def superstate(self, value: Optional[StateRepresentation]) -> None:
        self._superstate = value

    @property
    def substates(self) -> List[StateRepresentation]:
        """Direct substates, in the order they were attached."""
        return list(self._substates)

    @property
    def trigger_behaviours(self) -> Dict[Any, List[TriggerBehaviour]]:
        """A copy of the trigger -> behaviours mapping."""
        return {trigger: list(behaviours) for trigger, behaviours in self._trigger_behaviours.items()}

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def add_trigger_behaviour(self, behaviour: TriggerBehaviour) -> None:
        self._trigger_behaviours.setdefault(behaviour.trigger, []).append(behaviour)

    def add_entry_action(self, action: EntryAction) -> None:
        self._entry_actions.append(action)

    def add_exit_action(self, action: ExitAction) -> None:
        self._exit_actions.append(action)

    def add_substate(self, substate: StateRepresentation) -> None:
        if substate not in self._substates:
            self._substates.append(substate)

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def resolve(self, trigger: Any, args: Optional[Tuple[Any, ...]] = None) -> Optional[TriggerBehaviour]:
        """
        Find the behaviour that handles ``trigger``, looking at this state first
        and then up the superstate chain.

        Candidates for the same trigger are tried in declaration order and the
        first whose guard passes wins. Each guard is evaluated at most once.

        :param trigger: The trigger being fired.
        :param args: Trigger arguments, or None when they are unknown.
        :return: The active behaviour, or None if nothing handles the trigger.
        """
        behaviour = self._resolve_locally(trigger, args)
        if behaviour is None and self._superstate is not None:
            return self._superstate.resolve(trigger, args)
        return behaviour

    def _resolve_locally(self, trigger: Any, args: Optional[Tuple[Any, ...]]) -> Optional[TriggerBehaviour]:
        for behaviour in self._trigger_behaviours.get(trigger, ()):
            if behaviour.is_guard_condition_met(args):
                return behaviour
        return None

    def can_handle(self, trigger: Any) -> bool:
        """True if ``trigger`` resolves to a behaviour that would change state."""
        behaviour = self.resolve(trigger)
        return behaviour is not None and behaviour.transitions

    def permitted_triggers(self) -> List[Any]:
        """
        Triggers that would currently cause a transition from this state,
        including those inherited from superstates. Ignored triggers are not
        listed. Each trigger appears once, own triggers first.

        A trigger this state handles itself, including by ignoring it, hides
        the superstate's handling of the same trigger.
        """
        result: List[Any] = []
        handled = set()
        for trigger in self._trigger_behaviours:
            behaviour = self._resolve_locally(trigger, None)
            if behaviour is None:
                continue
            handled.add(trigger)
            if behaviour.transitions:
                result.append(trigger)
        if self._superstate is not None:
            for trigger in self._superstate.permitted_triggers():
                if trigger not in handled and trigger not in result:
                    result.append(trigger)
        return result

    # -------------------------------------------------------------------------
    # Hierarchy
    # -------------------------------------------------------------------------

    def includes(self, state: Any) -> bool:
        """True if ``state`` is this state or one of its descendants."""
        if self._state == state:
            return True
        return any(substate.includes(state) for substate in self._substates)

    def is_included_in(self, state: Any) -> bool:
        """True if this state is ``state`` or one of its descendants."""
        current: Optional[StateRepresentation] = self
        while current is not None:
            if current._state == state:
                return True
            current = current._superstate
        return False

    # -------------------------------------------------------------------------
    # Entry / exit
    # -------------------------------------------------------------------------

    def enter(self, transition: Transition, args: Tuple[Any, ...] = ()) -> None:
        """
        Run entry actions for ``transition``. Superstates that the transition
        came from inside of are not re-entered.
        """
        if transition.is_reentry:
            self._execute_entry_actions(transition, args)
        elif not self.includes(transition.source):
            if self._superstate is not None:
                self._superstate.enter(transition, args)
            self._execute_entry_actions(transition, args)

    def exit(self, transition: Transition) -> None:
        """
        Run exit actions for ``transition``, innermost first. Superstates that
        also contain the destination are not exited.
        """
        if transition.is_reentry:
            self._execute_exit_actions(transition)
        elif not self.includes(transition.destination):
            self._execute_exit_actions(transition)
            if self._superstate is not None:
                self._superstate.exit(transition)

    def _execute_entry_actions(self, transition: Transition, args: Tuple[Any, ...]) -> None:
        for action in self._entry_actions:
            action.execute(transition, args)

    def _execute_exit_actions(self, transition: Transition) -> None:
        for action in self._exit_actions:
            action.execute(transition)

    def __repr__(self) -> str:
        return f"StateRepresentation({self._state!r})"
