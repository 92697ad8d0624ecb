"""Exceptions raised by termcal."""


class TermCalError(ValueError):
    """Base class for all termcal errors."""
    pass


class InvalidCount(TermCalError):
    """Raised when a term count is not a positive integer."""
    pass


class UnknownPeriod(TermCalError):
    """Raised when a period unit name is not recognized."""
    pass


class MalformedRange(TermCalError):
    """Raised when a range token does not have exactly two ordered endpoints."""
    pass


class InvalidDate(TermCalError):
    """Raised when a day-month token is not a valid date in its year."""
    pass


class OverlapError(TermCalError):
    """Raised when forced holidays and forced work days would intersect."""

    def __init__(self, kind: str, dates: list) -> None:
        self.kind = kind
        self.dates = dates
        shown = ", ".join(d.isoformat() for d in dates[:5])
        if len(dates) > 5:
            shown += f", ... ({len(dates)} total)"
        super().__init__(
            f"Cannot set {kind}: dates overlap with the other override set ({shown})"
        )


class StorageCapabilityError(TermCalError):
    """Raised when a store does not provide the get/set contract."""
    pass
