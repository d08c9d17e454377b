# hstate/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Callable

# Callback Types
GuardFunc = Callable[..., bool]
ActionFunc = Callable[..., None]
DestinationSelector = Callable[..., Any]
StateAccessor = Callable[[], Any]
StateMutator = Callable[[Any], None]
UnhandledTriggerAction = Callable[[Any, Any], None]
