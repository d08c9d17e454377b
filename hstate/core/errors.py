# hstate/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any


class StateMachineError(Exception):
    """
    Base exception class for errors within the hierarchical state machine library.
    """


class InvalidOperationError(StateMachineError):
    """
    Raised when an operation is not valid for the current configuration or state.
    """


class ConfigurationError(InvalidOperationError):
    """
    Raised at configuration time when a state, transition or trigger declaration
    would break a structural invariant (cycles, re-parenting, implicit re-entry,
    conflicting trigger parameters).
    """


class UnhandledTriggerError(InvalidOperationError):
    """
    Raised by the default unhandled-trigger policy when no behaviour in the
    current state or its superstates handles a fired trigger.
    """

    def __init__(self, state: Any, trigger: Any) -> None:
        super().__init__(
            f"No valid leaving transitions are permitted from state '{state}' for trigger '{trigger}'. "
            "Consider ignoring the trigger."
        )
        self.state = state
        self.trigger = trigger


class InvalidArgumentError(StateMachineError, ValueError):
    """
    Raised when an argument supplied by the caller is rejected, such as trigger
    parameters that do not match their registered descriptor.
    """
