"""statusreport-specific exceptions."""


class StatusReportError(Exception):
    """Base class for errors that abort a report run.

    The CLI prints the message and exits non-zero; no partial report is shown.
    """


class SummationError(StatusReportError):
    """Raised when a price total cannot be computed (e.g. a malformed amount)."""


class UnclassifiableStatusError(StatusReportError, ValueError):
    """Raised when a status string is not confirmed, pending or declined."""


class ContactFormatError(StatusReportError):
    """Raised when the CLI input is not a valid list of contacts."""
