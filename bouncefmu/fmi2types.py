"""Core FMI 2.0 data types: status codes, FMU kinds, status kinds and event info."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

TYPES_PLATFORM = "default"
"""Identifier of the platform type definitions in use."""


class Status(IntEnum):
    """Result status of an FMI 2.0 function call."""

    OK = 0
    WARNING = 1
    DISCARD = 2
    ERROR = 3
    FATAL = 4
    PENDING = 5


class FmuType(IntEnum):
    """The modality an FMU instance is created for."""

    MODEL_EXCHANGE = 0
    CO_SIMULATION = 1


class StatusKind(IntEnum):
    """What a co-simulation status inquiry asks about."""

    DO_STEP_STATUS = 0
    PENDING_STATUS = 1
    LAST_SUCCESSFUL_TIME = 2
    TERMINATED = 3


_STATUS_NAMES = {
    Status.OK: "fmi2OK",
    Status.WARNING: "fmi2Warning",
    Status.DISCARD: "fmi2Discard",
    Status.ERROR: "fmi2Error",
    Status.FATAL: "fmi2Fatal",
    Status.PENDING: "fmi2Pending",
}


def status_name(status: Status | int) -> str:
    """Return the conventional name of a status, or "Unknown" if it is not one."""
    try:
        return _STATUS_NAMES[Status(status)]
    except (ValueError, TypeError):
        return "Unknown"


@dataclass
class EventInfo:
    """Information returned by the discrete-state update of a model."""

    new_discrete_states_needed: bool = False
    terminate_simulation: bool = False
    nominals_of_continuous_states_changed: bool = False
    values_of_continuous_states_changed: bool = False
    next_event_time_defined: bool = False
    next_event_time: float = 0.0

    def clear(self) -> None:
        """Reset every indicator flag to false, leaving the event time as is."""
        self.new_discrete_states_needed = False
        self.terminate_simulation = False
        self.nominals_of_continuous_states_changed = False
        self.values_of_continuous_states_changed = False
        self.next_event_time_defined = False