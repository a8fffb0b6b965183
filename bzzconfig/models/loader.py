"""Config loader state model — deterministic load-or-create transitions."""

from __future__ import annotations

from enum import Enum


class LoaderState(str, Enum):
    """States of a single config load."""

    START = "start"
    DIRECTORY_ENSURED = "directory_ensured"
    CREATING = "creating"
    READING = "reading"
    VALIDATING = "validating"
    READY = "ready"
    FAILED = "failed"


# Valid state transitions — enforced by ConfigLoader.
# Terminal states (READY, FAILED) have no outgoing transitions.
VALID_TRANSITIONS: dict[LoaderState, set[LoaderState]] = {
    LoaderState.START: {LoaderState.DIRECTORY_ENSURED, LoaderState.FAILED},
    LoaderState.DIRECTORY_ENSURED: {
        LoaderState.CREATING,
        LoaderState.READING,
        LoaderState.FAILED,
    },
    LoaderState.CREATING: {LoaderState.READY, LoaderState.FAILED},
    LoaderState.READING: {LoaderState.VALIDATING, LoaderState.FAILED},
    LoaderState.VALIDATING: {LoaderState.READY, LoaderState.FAILED},
    LoaderState.READY: set(),  # terminal
    LoaderState.FAILED: set(),  # terminal
}
