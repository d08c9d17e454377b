# hstate/core/triggers.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Any, Sequence, Tuple, Type

from hstate.core.errors import InvalidArgumentError

MAX_TRIGGER_PARAMETERS = 3


class TriggerWithParameters:
    """
    Associates a trigger with the ordered types of the arguments it must be
    fired with. Instances are created through
    ``StateMachineConfig.set_trigger_parameters`` and are immutable.
    """

    __slots__ = ("_trigger", "_argument_types")

    def __init__(self, trigger: Any, *argument_types: Type[Any]) -> None:
        """
        :param trigger: The underlying trigger value.
        :param argument_types: Zero to three argument types, in positional order.
        :raises InvalidArgumentError: If the trigger is None, more than three
            types are given, or a type is not a class.
        """
        if trigger is None:
            raise InvalidArgumentError("trigger is None")
        if len(argument_types) > MAX_TRIGGER_PARAMETERS:
            raise InvalidArgumentError(
                f"Trigger '{trigger}' declares {len(argument_types)} parameters; "
                f"at most {MAX_TRIGGER_PARAMETERS} are supported."
            )
        for argument_type in argument_types:
            if not isinstance(argument_type, type):
                raise InvalidArgumentError(f"Parameter type {argument_type!r} for trigger '{trigger}' is not a type")
        self._trigger = trigger
        self._argument_types: Tuple[Type[Any], ...] = tuple(argument_types)

    @property
    def trigger(self) -> Any:
        """The underlying trigger value."""
        return self._trigger

    @property
    def argument_types(self) -> Tuple[Type[Any], ...]:
        """The expected argument types, in positional order."""
        return self._argument_types

    def validate_parameters(self, args: Sequence[Any]) -> None:
        """
        Ensure that the supplied arguments match the declared signature.

        None is accepted in any position.

        :param args: Arguments the trigger is being fired with.
        :raises InvalidArgumentError: On too many or too few arguments, or a
            positional type mismatch.
        """
        expected = self._argument_types
        if len(args) > len(expected):
            raise InvalidArgumentError(
                f"Too many parameters have been supplied for trigger '{self._trigger}'. "
                f"Expecting {len(expected)} but got {len(args)}."
            )
        for position, argument_type in enumerate(expected):
            if position >= len(args):
                raise InvalidArgumentError(
                    f"An argument of type {argument_type.__name__} is required in position {position} "
                    f"for trigger '{self._trigger}'."
                )
            arg = args[position]
            if arg is not None and not isinstance(arg, argument_type):
                raise InvalidArgumentError(
                    f"The argument in position {position} of trigger '{self._trigger}' is of type "
                    f"{type(arg).__name__} but must be of type {argument_type.__name__}."
                )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TriggerWithParameters):
            return NotImplemented
        return self._trigger == other._trigger and self._argument_types == other._argument_types

    def __hash__(self) -> int:
        return hash((self._trigger, self._argument_types))

    def __repr__(self) -> str:
        names = ", ".join(t.__name__ for t in self._argument_types)
        return f"TriggerWithParameters({self._trigger!r}, ({names}))"


def unwrap_trigger(trigger: Any) -> Any:
    """Return the plain trigger value for a trigger or a parameter descriptor."""
    if isinstance(trigger, TriggerWithParameters):
        return trigger.trigger
    return trigger
