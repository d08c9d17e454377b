# tests/unit/test_configuration.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging

import pytest

from hstate.core.behaviours import (
    BehaviourKind,
    DynamicTriggerBehaviour,
    IgnoredTriggerBehaviour,
    ReentryTriggerBehaviour,
)
from hstate.core.configuration import StateConfiguration, StateMachineConfig
from hstate.core.errors import ConfigurationError, InvalidArgumentError
from hstate.core.triggers import TriggerWithParameters
from tests.utils import State, Trigger

# -----------------------------------------------------------------------------
# REGISTRY
# -----------------------------------------------------------------------------


def test_configure_returns_builder(config):
    builder = config.configure(State.A)
    assert isinstance(builder, StateConfiguration)
    assert builder.state is State.A


def test_representation_is_created_once(config):
    first = config.configure(State.A).representation
    second = config.configure(State.A).representation
    assert first is second
    assert config.get_representation(State.A) is first


def test_unconfigured_state_has_no_representation(config):
    assert config.get_representation(State.A) is None


def test_states_are_listed_in_configuration_order(config):
    config.configure(State.C)
    config.configure(State.A).substate_of(State.B)
    assert config.states == [State.C, State.A, State.B]


def test_with_name(config):
    assert config.name is None
    assert config.with_name("phone") is config
    assert config.name == "phone"


def test_entry_action_of_initial_state_toggle(config):
    assert not config.is_entry_action_of_initial_state_enabled()
    assert config.enable_entry_action_of_initial_state() is config
    assert config.is_entry_action_of_initial_state_enabled()
    config.disable_entry_action_of_initial_state()
    assert not config.is_entry_action_of_initial_state_enabled()


def test_configs_do_not_share_state():
    first, second = StateMachineConfig(), StateMachineConfig()
    first.configure(State.A).permit(Trigger.X, State.B)
    assert second.get_representation(State.A) is None


# -----------------------------------------------------------------------------
# BUILDER
# -----------------------------------------------------------------------------


def test_builder_methods_chain(config):
    builder = config.configure(State.A)
    assert (
        builder.permit(Trigger.X, State.B)
        .permit_if(Trigger.Y, State.C, lambda: True)
        .permit_reentry(Trigger.Z)
        is builder
    )


def test_builder_registers_each_variant(config):
    config.configure(State.A) \
        .permit(Trigger.X, State.B) \
        .permit_if(Trigger.X, State.C, lambda: False) \
        .ignore(Trigger.Y) \
        .permit_reentry_if(Trigger.Z, lambda: True) \
        .permit_dynamic(Trigger.Z, lambda: State.D)

    behaviours = config.get_representation(State.A).trigger_behaviours
    assert [b.kind for b in behaviours[Trigger.X]] == [BehaviourKind.UNCONDITIONAL, BehaviourKind.GUARDED]
    assert isinstance(behaviours[Trigger.Y][0], IgnoredTriggerBehaviour)
    assert isinstance(behaviours[Trigger.Z][0], ReentryTriggerBehaviour)
    assert behaviours[Trigger.Z][0].destination is State.A
    assert isinstance(behaviours[Trigger.Z][1], DynamicTriggerBehaviour)


def test_builder_unwraps_parameter_descriptors(config):
    descriptor = config.set_trigger_parameters(Trigger.X, str)
    config.configure(State.A).permit(descriptor, State.B)
    assert Trigger.X in config.get_representation(State.A).trigger_behaviours


def test_permit_to_same_state_is_rejected(config):
    with pytest.raises(ConfigurationError):
        config.configure(State.B).permit(Trigger.X, State.B)


def test_permit_if_to_same_state_is_rejected(config):
    with pytest.raises(ConfigurationError):
        config.configure(State.B).permit_if(Trigger.X, State.B, lambda: True)


def test_explicit_reentry_is_allowed(config):
    config.configure(State.B).permit_reentry(Trigger.X)
    assert config.get_representation(State.B).can_handle(Trigger.X)


def test_non_callable_guard_is_rejected(config):
    with pytest.raises(TypeError):
        config.configure(State.A).permit_if(Trigger.X, State.B, True)


# -----------------------------------------------------------------------------
# HIERARCHY
# -----------------------------------------------------------------------------


def test_substate_of_links_both_directions(config):
    config.configure(State.B).substate_of(State.C)
    b = config.get_representation(State.B)
    c = config.get_representation(State.C)
    assert b.superstate is c
    assert c.substates == [b]


def test_substate_of_same_parent_twice_is_noop(config):
    config.configure(State.B).substate_of(State.C).substate_of(State.C)
    assert len(config.get_representation(State.C).substates) == 1


def test_reparenting_is_rejected(config):
    config.configure(State.B).substate_of(State.C)
    with pytest.raises(ConfigurationError, match="re-parent"):
        config.configure(State.B).substate_of(State.D)


def test_state_cannot_be_its_own_superstate(config):
    with pytest.raises(ConfigurationError, match="cycle"):
        config.configure(State.A).substate_of(State.A)


def test_transitive_cycle_is_rejected(config):
    config.configure(State.A).substate_of(State.B)
    config.configure(State.B).substate_of(State.C)
    with pytest.raises(ConfigurationError, match="cycle"):
        config.configure(State.C).substate_of(State.A)
    assert config.get_representation(State.C).superstate is None


def test_substate_of_logs_link(config, caplog):
    with caplog.at_level(logging.DEBUG, logger="hstate.core.configuration"):
        config.configure(State.B).substate_of(State.C)
    assert "substate of" in caplog.text


# -----------------------------------------------------------------------------
# TRIGGER PARAMETERS
# -----------------------------------------------------------------------------


def test_set_trigger_parameters(config):
    descriptor = config.set_trigger_parameters(Trigger.X, str, int)
    assert isinstance(descriptor, TriggerWithParameters)
    assert config.is_trigger_configured(Trigger.X)
    assert config.get_trigger_configuration(Trigger.X) is descriptor
    assert not config.is_trigger_configured(Trigger.Y)


def test_trigger_parameters_are_immutable_once_set(config):
    config.set_trigger_parameters(Trigger.X, str, int)
    with pytest.raises(ConfigurationError):
        config.set_trigger_parameters(Trigger.X, str)


def test_registering_same_trigger_parameters_again_returns_existing(config):
    first = config.set_trigger_parameters(Trigger.X, str, int)
    assert config.set_trigger_parameters(Trigger.X, str, int) is first


def test_too_many_trigger_parameters(config):
    with pytest.raises(InvalidArgumentError):
        config.set_trigger_parameters(Trigger.X, str, int, float, bytes)
    assert not config.is_trigger_configured(Trigger.X)


def test_descriptor_cannot_be_registered_as_trigger(config):
    descriptor = config.set_trigger_parameters(Trigger.X, str)
    with pytest.raises(InvalidArgumentError):
        config.set_trigger_parameters(descriptor, str)
