"""Exception hierarchy.

Validation problems are reported as ValidationResult values, not raised.
"""


class FolioError(Exception):
    """Base exception for Folio errors."""

    pass


class DataSourceError(FolioError):
    """Raised when the portfolio document cannot be fetched or decoded."""

    pass


class RenderError(FolioError):
    """Raised by a section renderer that cannot produce its markup."""

    pass
