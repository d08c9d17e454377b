# hstate/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Any, Optional, Tuple


class Transition:
    """
    Describes a single state change: where the machine was, where it is going,
    and the trigger (plus arguments) that caused it. Built by the state machine
    for every successful fire and passed to entry and exit actions.
    """

    __slots__ = ("_source", "_destination", "_trigger", "_args")

    def __init__(self, source: Any, destination: Any, trigger: Any, args: Tuple[Any, ...] = ()) -> None:
        """
        :param source: The state being left.
        :param destination: The state being entered.
        :param trigger: The trigger that caused the transition, or None for the
            synthetic transition used when entering the initial state.
        :param args: Arguments the trigger was fired with.
        """
        self._source = source
        self._destination = destination
        self._trigger = trigger
        self._args = tuple(args)

    @property
    def source(self) -> Any:
        """The state transitioned from."""
        return self._source

    @property
    def destination(self) -> Any:
        """The state transitioned to."""
        return self._destination

    @property
    def trigger(self) -> Optional[Any]:
        """The trigger that caused the transition."""
        return self._trigger

    @property
    def args(self) -> Tuple[Any, ...]:
        """The arguments the trigger was fired with."""
        return self._args

    @property
    def is_reentry(self) -> bool:
        """True if the transition is a re-entry, i.e. the identity transition."""
        return self._source == self._destination

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transition):
            return NotImplemented
        return (self._source, self._destination, self._trigger, self._args) == (
            other._source,
            other._destination,
            other._trigger,
            other._args,
        )

    def __hash__(self) -> int:
        return hash((self._source, self._destination, self._trigger))

    def __repr__(self) -> str:
        return f"Transition({self._source!r} -> {self._destination!r} : {self._trigger!r})"
