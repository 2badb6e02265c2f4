"""Exception types raised by the measurement engine."""


class MicrobenchError(Exception):
    """Base class for microbench errors."""


class ArityMismatch(MicrobenchError, TypeError):
    """Raised when a callable cannot accept the supplied arguments."""


class InvalidArgument(MicrobenchError, ValueError):
    """Raised when an aggregator precondition is violated."""


class ResourceExhaustion(MicrobenchError, RuntimeError):
    """Raised when a worker to run the timed callable cannot be started."""
