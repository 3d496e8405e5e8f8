class DFAError(Exception):
    """Base class for structural failures of the simulator."""


class InvalidAutomaton(DFAError, ValueError):
    """The automaton is misconfigured, e.g. it has no start state."""


class ActivityCounterOverflow(DFAError, OverflowError):
    """A state's activity counter would exceed MAX_ACTIVITY_COUNT."""
