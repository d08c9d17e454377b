# tests/unit/test_transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from hstate.core.transitions import Transition
from tests.utils import State, Trigger


def test_transition_initialization():
    t = Transition(State.A, State.B, Trigger.X, ("a", 1))
    assert t.source is State.A
    assert t.destination is State.B
    assert t.trigger is Trigger.X
    assert t.args == ("a", 1)
    assert not t.is_reentry


def test_transition_defaults_to_no_args():
    t = Transition(State.A, State.B, Trigger.X)
    assert t.args == ()


def test_identity_transition_is_reentry():
    assert Transition(State.A, State.A, Trigger.X).is_reentry


def test_initial_transition_has_no_trigger():
    t = Transition(State.A, State.A, None)
    assert t.trigger is None
    assert t.is_reentry


def test_transition_args_are_a_tuple():
    t = Transition(State.A, State.B, Trigger.X, ["a", 1])
    assert t.args == ("a", 1)


def test_transition_equality():
    assert Transition(State.A, State.B, Trigger.X) == Transition(State.A, State.B, Trigger.X)
    assert Transition(State.A, State.B, Trigger.X) != Transition(State.A, State.C, Trigger.X)
    assert Transition(State.A, State.B, Trigger.X, (1,)) != Transition(State.A, State.B, Trigger.X, (2,))
    assert len({Transition(State.A, State.B, Trigger.X), Transition(State.A, State.B, Trigger.X)}) == 1


def test_transition_repr():
    assert "State.A" in repr(Transition(State.A, State.B, Trigger.X))
