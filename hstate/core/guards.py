# hstate/core/guards.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Callable, Optional, Tuple

from hstate.core.actions import _signature, accepts_arguments
from hstate.core.errors import InvalidArgumentError


class _GuardAdapter:
    """
    Internal class adapting a user predicate so it can be evaluated uniformly
    against the arguments a trigger was fired with.

    Predicates that declare no positional parameters are called bare; the rest
    receive the trigger arguments positionally.
    """

    def __init__(self, guard_fn: Callable[..., bool]) -> None:
        """
        Wrap a guard function.
        """
        if not callable(guard_fn):
            raise TypeError(f"Guard {guard_fn!r} is not callable")
        self._guard_fn = guard_fn
        self._takes_args = accepts_arguments(guard_fn)
        self._signature = _signature(guard_fn)

    def check(self, args: Optional[Tuple[Any, ...]]) -> bool:
        """
        Evaluate the wrapped guard.

        :param args: The trigger arguments, or None when they are unknown
            (introspection). A guard that cannot be called without arguments is
            considered satisfied when the arguments are unknown.
        :raises InvalidArgumentError: If the guard cannot be called with ``args``.
        """
        if not self._takes_args:
            return bool(self._guard_fn())
        if args is None:
            if self._signature is None or not self._can_bind(()):
                return True
            args = ()
        elif not self._can_bind(args):
            raise InvalidArgumentError(
                f"Guard {getattr(self._guard_fn, '__name__', self._guard_fn)!r} "
                f"cannot be called with {len(args)} argument(s)"
            )
        return bool(self._guard_fn(*args))

    def _can_bind(self, args: Tuple[Any, ...]) -> bool:
        if self._signature is None:
            return True
        try:
            self._signature.bind(*args)
        except TypeError:
            return False
        return True


def _always(*_: Any) -> bool:
    return True


NO_GUARD = _GuardAdapter(_always)
