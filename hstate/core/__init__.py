"""
Core package providing the hierarchical state machine engine.

Architecture:
- states.py: per-state representation nodes forming the hierarchy tree
- behaviours.py: the trigger behaviour variants held by each state
- triggers.py: typed parameter descriptors for triggers
- configuration.py: the registry of representations and the fluent builder
- state_machine.py: the engine that resolves and fires triggers
"""

from .errors import (
    ConfigurationError,
    InvalidArgumentError,
    InvalidOperationError,
    StateMachineError,
    UnhandledTriggerError,
)
from .transitions import Transition
from .actions import when_not_triggered_by, when_transitioning_to, when_triggered_by
from .behaviours import (
    BehaviourKind,
    DynamicTriggerBehaviour,
    GuardedTriggerBehaviour,
    IgnoredTriggerBehaviour,
    ReentryTriggerBehaviour,
    TriggerBehaviour,
    UnconditionalTriggerBehaviour,
)
from .triggers import TriggerWithParameters
from .states import StateRepresentation
from .configuration import StateConfiguration, StateMachineConfig
from .state_machine import StateMachine

__all__ = [
    # Errors
    "StateMachineError",
    "InvalidOperationError",
    "ConfigurationError",
    "UnhandledTriggerError",
    "InvalidArgumentError",
    # Behaviours
    "BehaviourKind",
    "TriggerBehaviour",
    "UnconditionalTriggerBehaviour",
    "GuardedTriggerBehaviour",
    "IgnoredTriggerBehaviour",
    "ReentryTriggerBehaviour",
    "DynamicTriggerBehaviour",
    # Other core classes
    "Transition",
    "TriggerWithParameters",
    "StateRepresentation",
    "StateConfiguration",
    "StateMachineConfig",
    "StateMachine",
    # Action filters
    "when_triggered_by",
    "when_not_triggered_by",
    "when_transitioning_to",
]
