# =============================================================================
# Exceptions
# =============================================================================
# Contract violations raised by the core. These are caller errors, not
# recoverable conditions, so nothing in the package catches them.
# =============================================================================


class FisherSpamError(Exception):
    """Base class for all fisherspam errors."""
    pass


class InvalidLabel(FisherSpamError, ValueError):
    """Raised when something other than a Label is used to train or count."""

    def __init__(self, label: object) -> None:
        super().__init__(f"Invalid label: {label!r} (expected Label.HAM or Label.SPAM)")
        self.label = label


class InvalidArgument(FisherSpamError, ValueError):
    """Raised when a numeric argument is outside the function's domain."""
    pass
