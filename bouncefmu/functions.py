"""Names of the FMI 2.0 interface functions and how exported symbols are formed."""

from __future__ import annotations

from enum import Enum

VERSION = "2.0"
"""Version of the FMI interface these functions belong to."""


class FunctionGroup(Enum):
    """The parts of the FMI 2.0 interface a function belongs to."""

    COMMON = "common"
    MODEL_EXCHANGE = "model_exchange"
    CO_SIMULATION = "co_simulation"


_FUNCTIONS: dict[FunctionGroup, tuple[str, ...]] = {
    FunctionGroup.COMMON: (
        "fmi2GetTypesPlatform",
        "fmi2GetVersion",
        "fmi2SetDebugLogging",
        "fmi2Instantiate",
        "fmi2FreeInstance",
        "fmi2SetupExperiment",
        "fmi2EnterInitializationMode",
        "fmi2ExitInitializationMode",
        "fmi2Terminate",
        "fmi2Reset",
        "fmi2GetReal",
        "fmi2GetInteger",
        "fmi2GetBoolean",
        "fmi2GetString",
        "fmi2SetReal",
        "fmi2SetInteger",
        "fmi2SetBoolean",
        "fmi2SetString",
        "fmi2GetFMUstate",
        "fmi2SetFMUstate",
        "fmi2FreeFMUstate",
        "fmi2SerializedFMUstateSize",
        "fmi2SerializeFMUstate",
        "fmi2DeSerializeFMUstate",
        "fmi2GetDirectionalDerivative",
    ),
    FunctionGroup.MODEL_EXCHANGE: (
        "fmi2EnterEventMode",
        "fmi2NewDiscreteStates",
        "fmi2EnterContinuousTimeMode",
        "fmi2CompletedIntegratorStep",
        "fmi2SetTime",
        "fmi2SetContinuousStates",
        "fmi2GetDerivatives",
        "fmi2GetEventIndicators",
        "fmi2GetContinuousStates",
        "fmi2GetNominalsOfContinuousStates",
    ),
    FunctionGroup.CO_SIMULATION: (
        "fmi2SetRealInputDerivatives",
        "fmi2GetRealOutputDerivatives",
        "fmi2DoStep",
        "fmi2CancelStep",
        "fmi2GetStatus",
        "fmi2GetRealStatus",
        "fmi2GetIntegerStatus",
        "fmi2GetBooleanStatus",
        "fmi2GetStringStatus",
    ),
}


def full_name(name: str, prefix: str | None = None) -> str:
    """Return the symbol name of a function, with the optional prefix prepended.

    Without a prefix (None or empty) the plain function name is used, as for
    FMUs built as shared libraries.
    """
    if not name:
        raise ValueError("function name must not be empty")
    return f"{prefix}{name}" if prefix else name


def functions_for(group: FunctionGroup | str) -> tuple[str, ...]:
    """Return the function names of one interface group, in declaration order."""
    return _FUNCTIONS[FunctionGroup(group)]


def exported_names(prefix: str | None = None) -> list[str]:
    """Return every exported function symbol, common functions first."""
    return [
        full_name(name, prefix)
        for group in FunctionGroup
        for name in _FUNCTIONS[group]
    ]