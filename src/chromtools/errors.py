from __future__ import annotations


class ChromtoolsError(Exception):
    """Base exception for chromtools."""


class GraphInputError(ChromtoolsError, ValueError):
    """Malformed graph at the input boundary (bad vertex, self-loop, duplicate edge)."""


class ComputationCancelled(ChromtoolsError):
    """The graph changed (or shutdown began) while a computation was in flight.

    Not a failure: the caller discards partial work and retries from the
    latest graph state.
    """


class ComputationFailed(ChromtoolsError, RuntimeError):
    """A computation cycle could not complete (out of memory, graph too large)."""
