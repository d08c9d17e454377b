# hstate/core/configuration.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Type

from hstate.core.actions import EntryAction, ExitAction
from hstate.core.behaviours import (
    DynamicTriggerBehaviour,
    GuardedTriggerBehaviour,
    IgnoredTriggerBehaviour,
    ReentryTriggerBehaviour,
    TriggerBehaviour,
    UnconditionalTriggerBehaviour,
)
from hstate.core.errors import ConfigurationError, InvalidArgumentError
from hstate.core.guards import _GuardAdapter
from hstate.core.states import StateRepresentation
from hstate.core.triggers import TriggerWithParameters, unwrap_trigger
from hstate.interfaces.types import ActionFunc, DestinationSelector, GuardFunc

logger = logging.getLogger(__name__)


class StateConfiguration:
    """
    Fluent builder bound to one state's representation. Every method returns
    the builder so calls can be chained.
    """

    def __init__(self, representation: StateRepresentation, lookup: Callable[[Any], StateRepresentation]) -> None:
        """
        :param representation: The representation being configured.
        :param lookup: Returns (creating if needed) the representation of another state.
        """
        self._representation = representation
        self._lookup = lookup

    @property
    def state(self) -> Any:
        """The state being configured."""
        return self._representation.underlying_state

    @property
    def representation(self) -> StateRepresentation:
        return self._representation

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def permit(self, trigger: Any, destination: Any, action: Optional[ActionFunc] = None) -> StateConfiguration:
        """
        Accept ``trigger`` and transition to ``destination``.

        :param trigger: The accepted trigger (or its parameter descriptor).
        :param destination: The state the trigger leads to.
        :param action: Optional callable run between exit and entry.
        :raises ConfigurationError: If ``destination`` is the state being configured.
        """
        self._enforce_not_identity_transition(destination)
        return self._add(UnconditionalTriggerBehaviour(unwrap_trigger(trigger), destination, action))

    def permit_if(
        self,
        trigger: Any,
        destination: Any,
        guard: GuardFunc,
        action: Optional[ActionFunc] = None,
    ) -> StateConfiguration:
        """
        Accept ``trigger`` and transition to ``destination`` if ``guard`` passes.
        Several guarded permits may share a trigger; the first passing guard, in
        declaration order, is taken.

        :raises ConfigurationError: If ``destination`` is the state being configured.
        """
        self._enforce_not_identity_transition(destination)
        return self._add(
            GuardedTriggerBehaviour(unwrap_trigger(trigger), destination, _GuardAdapter(guard), action)
        )

    def permit_reentry(self, trigger: Any, action: Optional[ActionFunc] = None) -> StateConfiguration:
        """
        Accept ``trigger``, exit this state and re-enter it. Entry and exit
        actions of this state run; those of its superstates do not.

        When this state is a superstate and the trigger is fired from one of its
        substates, the transition goes from the substate to this state. Only the
        substate is exited; this state is neither exited nor re-entered because
        it already contains the source.
        """
        return self._add(ReentryTriggerBehaviour(unwrap_trigger(trigger), self.state, action=action))

    def permit_reentry_if(
        self,
        trigger: Any,
        guard: GuardFunc,
        action: Optional[ActionFunc] = None,
    ) -> StateConfiguration:
        """Like ``permit_reentry``, but only when ``guard`` passes."""
        return self._add(ReentryTriggerBehaviour(unwrap_trigger(trigger), self.state, _GuardAdapter(guard), action))

    def ignore(self, trigger: Any) -> StateConfiguration:
        """Ignore ``trigger`` in this state: firing it does nothing."""
        return self._add(IgnoredTriggerBehaviour(unwrap_trigger(trigger)))

    def ignore_if(self, trigger: Any, guard: GuardFunc) -> StateConfiguration:
        """Ignore ``trigger`` in this state when ``guard`` passes."""
        return self._add(IgnoredTriggerBehaviour(unwrap_trigger(trigger), _GuardAdapter(guard)))

    def permit_dynamic(
        self,
        trigger: Any,
        destination_selector: DestinationSelector,
        action: Optional[ActionFunc] = None,
    ) -> StateConfiguration:
        """
        Accept ``trigger`` and transition to the state returned by
        ``destination_selector``, which receives the trigger arguments.

        :param action: Optional callable run between exit and entry; it
            receives the trigger arguments too.
        """
        return self._add(DynamicTriggerBehaviour(unwrap_trigger(trigger), destination_selector, action=action))

    def permit_dynamic_if(
        self,
        trigger: Any,
        destination_selector: DestinationSelector,
        guard: GuardFunc,
        action: Optional[ActionFunc] = None,
    ) -> StateConfiguration:
        """Like ``permit_dynamic``, but only when ``guard`` passes."""
        return self._add(
            DynamicTriggerBehaviour(unwrap_trigger(trigger), destination_selector, _GuardAdapter(guard), action)
        )

    # -------------------------------------------------------------------------
    # Entry / exit
    # -------------------------------------------------------------------------

    def on_entry(self, action: ActionFunc) -> StateConfiguration:
        """
        Run ``action`` whenever the state is entered. The action may take no
        arguments or a single Transition.
        """
        self._representation.add_entry_action(EntryAction(action))
        return self

    def on_entry_from(self, trigger: Any, action: ActionFunc) -> StateConfiguration:
        """
        Run ``action`` when the state is entered because of ``trigger``.

        If ``trigger`` is a parameter descriptor the action is called with the
        trigger arguments; otherwise it takes nothing or a Transition.
        """
        with_args = isinstance(trigger, TriggerWithParameters)
        self._representation.add_entry_action(EntryAction(action, unwrap_trigger(trigger), with_trigger_args=with_args))
        return self

    def on_exit(self, action: ActionFunc) -> StateConfiguration:
        """
        Run ``action`` whenever the state is exited. The action may take no
        arguments or a single Transition; see ``when_triggered_by`` and friends
        for filtering.
        """
        self._representation.add_exit_action(ExitAction(action))
        return self

    # -------------------------------------------------------------------------
    # Hierarchy
    # -------------------------------------------------------------------------

    def substate_of(self, superstate: Any) -> StateConfiguration:
        """
        Make this state a substate of ``superstate``. Triggers not handled here
        are then resolved by the superstate.

        :raises ConfigurationError: If the link would create a cycle, or the
            state already has a different superstate.
        """
        representation = self._representation
        current = representation.superstate
        if current is not None:
            if current.underlying_state == superstate:
                return self
            raise ConfigurationError(
                f"Cannot re-parent state '{self.state}' from '{current.underlying_state}' "
                f"to '{superstate}'. A state has at most one superstate."
            )

        parent = self._lookup(superstate)
        if parent.is_included_in(self.state):
            raise ConfigurationError(
                f"Making '{self.state}' a substate of '{superstate}' would create a cycle in the state hierarchy"
            )

        representation.superstate = parent
        parent.add_substate(representation)
        logger.debug("State %s is now a substate of %s", self.state, superstate)
        return self

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _add(self, behaviour: TriggerBehaviour) -> StateConfiguration:
        self._representation.add_trigger_behaviour(behaviour)
        return self

    def _enforce_not_identity_transition(self, destination: Any) -> None:
        if destination == self.state:
            raise ConfigurationError(
                f"permit() and permit_if() require that the destination state is not equal to the source "
                f"state '{self.state}'. To accept a trigger without changing state, use either ignore() "
                f"or permit_reentry()."
            )


class StateMachineConfig:
    """
    Registry of state representations and trigger parameter descriptors. A
    config can be shared by several StateMachine instances; all configuration
    is scoped to the instance.
    """

    def __init__(self) -> None:
        self._state_configuration: Dict[Any, StateRepresentation] = {}
        self._trigger_configuration: Dict[Any, TriggerWithParameters] = {}
        self._entry_action_of_initial_state_enabled = False
        self._name: Optional[str] = None

    @property
    def name(self) -> Optional[str]:
        return self._name

    def with_name(self, name: str) -> StateMachineConfig:
        """Name the machine; the name appears in its summary string."""
        self._name = name
        return self

    @property
    def states(self) -> List[Any]:
        """Configured states, in the order they were first configured."""
        return list(self._state_configuration)

    # -------------------------------------------------------------------------
    # Initial state entry
    # -------------------------------------------------------------------------

    def is_entry_action_of_initial_state_enabled(self) -> bool:
        return self._entry_action_of_initial_state_enabled

    def enable_entry_action_of_initial_state(self) -> StateMachineConfig:
        """
        Run the initial state's entry actions when a StateMachine is
        constructed with this config.
        """
        self._entry_action_of_initial_state_enabled = True
        return self

    def disable_entry_action_of_initial_state(self) -> StateMachineConfig:
        self._entry_action_of_initial_state_enabled = False
        return self

    # -------------------------------------------------------------------------
    # States
    # -------------------------------------------------------------------------

    def get_representation(self, state: Any) -> Optional[StateRepresentation]:
        """Return the representation of ``state``, or None if it is not configured."""
        return self._state_configuration.get(state)

    def _get_or_create_representation(self, state: Any) -> StateRepresentation:
        representation = self._state_configuration.get(state)
        if representation is None:
            representation = StateRepresentation(state)
            self._state_configuration[state] = representation
        return representation

    def configure(self, state: Any) -> StateConfiguration:
        """
        Begin configuration of ``state``. The representation is created on first
        use and reused afterwards, so configuration is additive.

        :param state: The state to configure.
        :return: A builder bound to the state.
        """
        return StateConfiguration(self._get_or_create_representation(state), self._get_or_create_representation)

    # -------------------------------------------------------------------------
    # Trigger parameters
    # -------------------------------------------------------------------------

    def get_trigger_configuration(self, trigger: Any) -> Optional[TriggerWithParameters]:
        return self._trigger_configuration.get(trigger)

    def is_trigger_configured(self, trigger: Any) -> bool:
        return trigger in self._trigger_configuration

    def set_trigger_parameters(self, trigger: Any, *argument_types: Type[Any]) -> TriggerWithParameters:
        """
        Declare the argument types ``trigger`` must be fired with.

        Registering the same signature twice returns the existing descriptor.

        :param trigger: The trigger.
        :param argument_types: Zero to three argument types.
        :return: A descriptor usable with ``StateMachine.fire`` and the builder.
        :raises ConfigurationError: If the trigger already has a different signature.
        :raises InvalidArgumentError: If the signature itself is invalid.
        """
        if isinstance(trigger, TriggerWithParameters):
            raise InvalidArgumentError("set_trigger_parameters expects a plain trigger value")
        configuration = TriggerWithParameters(trigger, *argument_types)
        existing = self._trigger_configuration.get(trigger)
        if existing is not None:
            if existing == configuration:
                return existing
            raise ConfigurationError(f"Parameters for the trigger '{trigger}' have already been configured.")
        self._trigger_configuration[trigger] = configuration
        logger.debug("Registered parameters %s for trigger %s", configuration.argument_types, trigger)
        return configuration
