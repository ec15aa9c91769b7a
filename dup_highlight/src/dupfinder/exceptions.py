"""Exception hierarchy for dup-highlight."""


class DupHighlightError(Exception):
    """Base exception for all dup-highlight errors."""


class DocumentReadError(DupHighlightError):
    """The input document could not be opened or decoded."""


class ReportWriteError(DupHighlightError):
    """The rendered report could not be written to its destination."""
