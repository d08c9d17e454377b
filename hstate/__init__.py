"""hstate: hierarchical state machines driven by typed triggers

Configure which triggers are valid in which states, attach guards, entry and
exit actions and typed trigger parameters, then fire triggers synchronously:

    config = StateMachineConfig()
    config.configure(State.OFF_HOOK).permit(Trigger.CALL_DIALED, State.RINGING)
    config.configure(State.RINGING).permit(Trigger.HUNG_UP, State.OFF_HOOK)

    phone = StateMachine(State.OFF_HOOK, config)
    phone.fire(Trigger.CALL_DIALED)

Cross-cutting Concerns:
    Thread Safety:
        - None; a machine is driven by one thread at a time
        - External state storage is synchronised by its owner

    Error Handling:
        - Configuration mistakes raise ConfigurationError immediately
        - Invalid trigger arguments raise InvalidArgumentError before any action runs
        - Unhandled triggers go through a replaceable policy

    Logging:
        - Standard library logging under the ``hstate`` logger namespace
        - DEBUG for fires and transitions, WARNING for the logging unhandled policy
"""

__version__ = "0.1.0"

from hstate.core import (
    BehaviourKind,
    ConfigurationError,
    DynamicTriggerBehaviour,
    GuardedTriggerBehaviour,
    IgnoredTriggerBehaviour,
    InvalidArgumentError,
    InvalidOperationError,
    ReentryTriggerBehaviour,
    StateConfiguration,
    StateMachine,
    StateMachineConfig,
    StateMachineError,
    StateRepresentation,
    Transition,
    TriggerBehaviour,
    TriggerWithParameters,
    UnconditionalTriggerBehaviour,
    UnhandledTriggerError,
    when_not_triggered_by,
    when_transitioning_to,
    when_triggered_by,
)
from hstate.core import __all__
