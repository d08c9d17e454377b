# hstate/core/state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, List, Optional

from hstate.core.configuration import StateConfiguration, StateMachineConfig
from hstate.core.errors import InvalidArgumentError, UnhandledTriggerError
from hstate.core.states import StateRepresentation
from hstate.core.transitions import Transition
from hstate.core.triggers import unwrap_trigger
from hstate.interfaces.types import StateAccessor, StateMutator, UnhandledTriggerAction

logger = logging.getLogger(__name__)


class _StateReference:
    """Internal cell holding the current state when no external storage is given."""

    def __init__(self, state: Any) -> None:
        self.state = state

    def get(self) -> Any:
        return self.state

    def set(self, value: Any) -> None:
        self.state = value


def _raise_unhandled_trigger(state: Any, trigger: Any) -> None:
    raise UnhandledTriggerError(state, trigger)


class StateMachine:
    """
    Models behaviour as transitions between a finite set of states, driven by
    triggers configured in a StateMachineConfig.

    The machine is synchronous and single-threaded. Callbacks must not fire
    triggers on the same machine while a fire is in progress.
    """

    def __init__(
        self,
        initial_state: Any,
        config: Optional[StateMachineConfig] = None,
        accessor: Optional[StateAccessor] = None,
        mutator: Optional[StateMutator] = None,
    ) -> None:
        """
        :param initial_state: The state in which this machine begins.
        :param config: The configuration to use; a new empty one by default.
        :param accessor: Optional callable returning the current state from
            caller-owned storage. Must be given together with ``mutator``.
        :param mutator: Optional callable storing a new current state.
        :raises InvalidArgumentError: If only one of accessor/mutator is given.
        """
        if (accessor is None) != (mutator is None):
            raise InvalidArgumentError("accessor and mutator must be supplied together")

        self._config = config if config is not None else StateMachineConfig()
        self._unhandled_trigger_action: UnhandledTriggerAction = _raise_unhandled_trigger

        if accessor is None:
            reference = _StateReference(initial_state)
            self._state_accessor: StateAccessor = reference.get
            self._state_mutator: StateMutator = reference.set
            if self._config.is_entry_action_of_initial_state_enabled():
                initial_transition = Transition(initial_state, initial_state, None)
                self._current_representation().enter(initial_transition)
        else:
            self._state_accessor = accessor
            self._state_mutator = mutator
            self._state_mutator(initial_state)

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def configure(self, state: Any) -> StateConfiguration:
        """Shortcut for ``self.configuration.configure(state)``."""
        return self._config.configure(state)

    @property
    def configuration(self) -> StateMachineConfig:
        return self._config

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def state(self) -> Any:
        """The current state."""
        return self._state_accessor()

    def _set_state(self, value: Any) -> None:
        self._state_mutator(value)

    def _current_representation(self) -> StateRepresentation:
        state = self.state
        representation = self._config.get_representation(state)
        # Unconfigured states behave as states with no behaviours.
        return representation if representation is not None else StateRepresentation(state)

    @property
    def permitted_triggers(self) -> List[Any]:
        """The triggers that would currently cause a transition."""
        return self._current_representation().permitted_triggers()

    def can_fire(self, trigger: Any) -> bool:
        """
        Return True if ``trigger`` would cause a transition in the current state.
        Guards are evaluated without arguments.
        """
        return self._current_representation().can_handle(unwrap_trigger(trigger))

    def is_in_state(self, state: Any) -> bool:
        """
        Determine if the machine is in ``state``.

        :return: True if the current state is equal to, or a substate of, ``state``.
        """
        return self._current_representation().is_included_in(state)

    # -------------------------------------------------------------------------
    # Firing
    # -------------------------------------------------------------------------

    def fire(self, trigger: Any, *args: Any) -> None:
        """
        Transition from the current state via ``trigger``. The destination is
        determined by the configuration of the current state and its
        superstates. Exit actions of the current state, the transition action,
        the state change and entry actions of the new state happen in that order.

        :param trigger: A trigger value or a TriggerWithParameters descriptor.
        :param args: Trigger arguments, validated against the registered
            descriptor for the trigger if there is one.
        :raises InvalidArgumentError: If the arguments do not match the descriptor.
        :raises UnhandledTriggerError: If nothing handles the trigger and the
            default unhandled-trigger policy is installed.
        """
        if trigger is None:
            raise InvalidArgumentError("trigger is None")
        trigger = unwrap_trigger(trigger)
        logger.debug("Firing %s", trigger)

        configuration = self._config.get_trigger_configuration(trigger)
        if configuration is not None:
            configuration.validate_parameters(args)

        representation = self._current_representation()
        behaviour = representation.resolve(trigger, args)
        if behaviour is None:
            self._unhandled_trigger_action(representation.underlying_state, trigger)
            return

        source = self.state
        transitions, destination = behaviour.results_in_transition_from(source, args)
        if not transitions:
            logger.debug("Trigger %s ignored in state %s", trigger, source)
            return

        transition = Transition(source, destination, trigger, args)
        representation.exit(transition)
        behaviour.perform_action(args)
        self._set_state(destination)
        self._current_representation().enter(transition, args)
        logger.debug("%s --> %s : %s", source, destination, trigger)

    # -------------------------------------------------------------------------
    # Unhandled triggers
    # -------------------------------------------------------------------------

    def on_unhandled_trigger(self, unhandled_trigger_action: UnhandledTriggerAction) -> None:
        """
        Override the default behaviour of raising UnhandledTriggerError when a
        trigger is fired that nothing handles.

        :param unhandled_trigger_action: Called with ``(state, trigger)``.
        :raises InvalidArgumentError: If the action is None or not callable.
        """
        if unhandled_trigger_action is None or not callable(unhandled_trigger_action):
            raise InvalidArgumentError("unhandled_trigger_action must be a callable")
        self._unhandled_trigger_action = unhandled_trigger_action

    def log_unhandled_trigger(self, state: Any, trigger: Any) -> None:
        """
        An unhandled-trigger policy that logs a warning instead of raising.
        Install it with ``machine.on_unhandled_trigger(machine.log_unhandled_trigger)``.
        """
        logger.warning(
            "No transition defined for trigger %s when in state %s. "
            "Consider ignoring the trigger as part of the configuration.",
            trigger,
            state,
        )

    def __str__(self) -> str:
        """A description of the current state and permitted triggers."""
        params = ", ".join(str(trigger) for trigger in self.permitted_triggers)
        prefix = f"{self._config.name} " if self._config.name else ""
        return f"{prefix}StateMachine {{ State = {self.state}, PermittedTriggers = {{ {params} }}}}"

    def __repr__(self) -> str:
        return f"<StateMachine name={self._config.name!r} state={self.state!r}>"
