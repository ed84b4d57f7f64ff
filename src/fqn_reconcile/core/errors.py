class ReconcileError(Exception):
    """Base class for failures raised by the reconciliation engine."""


class LocationKindError(ReconcileError):
    """The source unit has no location on the local filesystem."""


class NoCandidateError(ReconcileError):
    """A candidate resolver could not map a path to any class name."""


class ResolutionError(ReconcileError):
    """No canonical class name could be derived for the source unit."""


class OverlappingEditsError(ValueError):
    """Two edits in one set touch the same bytes."""
