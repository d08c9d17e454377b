# tests/utils.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Common test utilities and data for hstate tests.
"""

from enum import Enum
from typing import Any, Callable, List, Tuple


class State(Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"


class Trigger(Enum):
    X = "X"
    Y = "Y"
    Z = "Z"


# -----------------------------------------------------------------------------
# TEST HELPERS
# -----------------------------------------------------------------------------


class CallRecorder:
    """Records labelled calls in order so tests can assert on callback sequencing."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def __call__(self, label: str) -> Callable[..., None]:
        def _record(*args: Any) -> None:
            self.calls.append((label, args))

        return _record

    @property
    def labels(self) -> List[str]:
        return [label for label, _ in self.calls]
