"""Exception types shared by the store and the sync layer."""


class InspiraError(Exception):
    """Base class for Inspira errors."""


class StorageError(InspiraError):
    """A read, write or delete against the quote database failed."""


class InvariantViolation(InspiraError):
    """More than one empty draft quote was found.

    This means an earlier operation failed to reconcile its draft. It is
    raised before anything is deleted so the breach stays visible.
    """

    def __init__(self, positions):
        self.positions = list(positions)
        super().__init__(
            f"Expected at most one empty draft, found {len(self.positions)} "
            f"at positions {self.positions}"
        )
