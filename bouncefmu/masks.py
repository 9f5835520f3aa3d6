"""Model states and the FMI 2.0 calls each state allows."""

from __future__ import annotations

from enum import IntFlag


class ModelState(IntFlag):
    """States of an FMU instance, one bit each so they combine into masks."""

    START_END = 0b0000000000000001
    INSTANTIATED = 0b0000000000000010
    INIT_MODE = 0b0000000000000100

    # Model Exchange states.
    EVENT_MODE = 0b0000000000001000
    CONTINUOUS_MODE = 0b0000000000010000

    # Co-Simulation states.
    STEP_COMPLETE = 0b0000000000100000
    STEP_IN_PROGRESS = 0b0000000001000000
    STEP_FAILED = 0b0000000010000000
    STEP_CANCELED = 0b0000000100000000

    TERMINATED = 0b0000001000000000
    ERROR = 0b0000010000000000
    FATAL = 0b0000100000000000


_S = ModelState

_ANY_BUT_FATAL = (
    _S.START_END
    | _S.INSTANTIATED
    | _S.INIT_MODE
    | _S.EVENT_MODE
    | _S.CONTINUOUS_MODE
    | _S.STEP_COMPLETE
    | _S.STEP_IN_PROGRESS
    | _S.STEP_FAILED
    | _S.STEP_CANCELED
    | _S.TERMINATED
    | _S.ERROR
)

_SET_DEBUG_LOGGING = _ANY_BUT_FATAL & ~_S.START_END

_FREE_INSTANCE = (
    _S.INSTANTIATED
    | _S.INIT_MODE
    | _S.EVENT_MODE
    | _S.CONTINUOUS_MODE
    | _S.STEP_COMPLETE
    | _S.STEP_FAILED
    | _S.STEP_CANCELED
    | _S.TERMINATED
    | _S.ERROR
)

_GET_VALUE = (
    _S.INIT_MODE
    | _S.EVENT_MODE
    | _S.CONTINUOUS_MODE
    | _S.STEP_COMPLETE
    | _S.STEP_FAILED
    | _S.STEP_CANCELED
    | _S.TERMINATED
    | _S.ERROR
)

_SET_REAL = (
    _S.INSTANTIATED
    | _S.INIT_MODE
    | _S.EVENT_MODE
    | _S.CONTINUOUS_MODE
    | _S.STEP_COMPLETE
)

_SET_DISCRETE = _S.INSTANTIATED | _S.INIT_MODE | _S.EVENT_MODE | _S.STEP_COMPLETE

_GET_EVENT_INDICATORS = (
    _S.INIT_MODE | _S.EVENT_MODE | _S.CONTINUOUS_MODE | _S.TERMINATED | _S.ERROR
)

_GET_STATUS = (
    _S.STEP_COMPLETE | _S.STEP_IN_PROGRESS | _S.STEP_FAILED | _S.TERMINATED
)

_MASKS: dict[str, ModelState] = {
    # Common to Model Exchange and Co-Simulation.
    "fmi2GetTypesPlatform": _ANY_BUT_FATAL,
    "fmi2GetVersion": _ANY_BUT_FATAL,
    "fmi2SetDebugLogging": _SET_DEBUG_LOGGING,
    "fmi2Instantiate": _S.START_END,
    "fmi2FreeInstance": _FREE_INSTANCE,
    "fmi2SetupExperiment": _S.INSTANTIATED,
    "fmi2EnterInitializationMode": _S.INSTANTIATED,
    "fmi2ExitInitializationMode": _S.INIT_MODE,
    "fmi2Terminate": (
        _S.EVENT_MODE | _S.CONTINUOUS_MODE | _S.STEP_COMPLETE | _S.STEP_FAILED
    ),
    "fmi2Reset": _FREE_INSTANCE,
    "fmi2GetReal": _GET_VALUE,
    "fmi2GetInteger": _GET_VALUE,
    "fmi2GetBoolean": _GET_VALUE,
    "fmi2GetString": _GET_VALUE,
    "fmi2SetReal": _SET_REAL,
    "fmi2SetInteger": _SET_DISCRETE,
    "fmi2SetBoolean": _SET_DISCRETE,
    "fmi2SetString": _SET_DISCRETE,
    "fmi2GetFMUstate": _FREE_INSTANCE,
    "fmi2SetFMUstate": _FREE_INSTANCE,
    "fmi2FreeFMUstate": _FREE_INSTANCE,
    "fmi2SerializedFMUstateSize": _FREE_INSTANCE,
    "fmi2SerializeFMUstate": _FREE_INSTANCE,
    "fmi2DeSerializeFMUstate": _FREE_INSTANCE,
    "fmi2GetDirectionalDerivative": _GET_VALUE,
    # Model Exchange.
    "fmi2EnterEventMode": _S.EVENT_MODE | _S.CONTINUOUS_MODE,
    "fmi2NewDiscreteStates": _S.EVENT_MODE,
    "fmi2EnterContinuousTimeMode": _S.EVENT_MODE,
    "fmi2CompletedIntegratorStep": _S.CONTINUOUS_MODE,
    "fmi2SetTime": _S.EVENT_MODE | _S.CONTINUOUS_MODE,
    "fmi2SetContinuousStates": _S.CONTINUOUS_MODE,
    "fmi2GetEventIndicators": _GET_EVENT_INDICATORS,
    "fmi2GetContinuousStates": _GET_EVENT_INDICATORS,
    "fmi2GetDerivatives": (
        _S.EVENT_MODE | _S.CONTINUOUS_MODE | _S.TERMINATED | _S.ERROR
    ),
    "fmi2GetNominalsOfContinuousStates": (
        _S.INSTANTIATED
        | _S.EVENT_MODE
        | _S.CONTINUOUS_MODE
        | _S.TERMINATED
        | _S.ERROR
    ),
    # Co-Simulation.
    "fmi2SetRealInputDerivatives": (
        _S.INSTANTIATED | _S.INIT_MODE | _S.STEP_COMPLETE
    ),
    "fmi2GetRealOutputDerivatives": (
        _S.STEP_COMPLETE
        | _S.STEP_FAILED
        | _S.STEP_CANCELED
        | _S.TERMINATED
        | _S.ERROR
    ),
    "fmi2DoStep": _S.STEP_COMPLETE,
    "fmi2CancelStep": _S.STEP_IN_PROGRESS,
    "fmi2GetStatus": _GET_STATUS,
    "fmi2GetRealStatus": _GET_STATUS,
    "fmi2GetIntegerStatus": _GET_STATUS,
    "fmi2GetBooleanStatus": _GET_STATUS,
    "fmi2GetStringStatus": _GET_STATUS,
}


def allowed_states(function_name: str) -> ModelState:
    """Return the mask of model states in which the named call is allowed."""
    try:
        return _MASKS[function_name]
    except KeyError:
        raise ValueError(f"unknown FMI 2.0 function: {function_name!r}") from None


def is_call_allowed(function_name: str, state: ModelState | int) -> bool:
    """Tell whether the named call is valid while the model is in ``state``."""
    return bool(allowed_states(function_name) & ModelState(state))