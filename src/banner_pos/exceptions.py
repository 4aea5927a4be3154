"""Domain-specific exceptions for banner-pos.

This module defines custom exceptions that are part of the public API.
All exceptions inherit from BannerPosError for easy catching.
"""


class BannerPosError(Exception):
    """Base exception for all banner-pos errors.

    Users can catch this exception to handle any banner-pos error.
    """

    pass


class ConfigError(BannerPosError):
    """Raised when there is a configuration error.

    This exception is raised when:
    - Invalid configuration values are provided
    - The data root points at something that is not a directory
    """

    pass


class StorageError(BannerPosError):
    """Raised when the key-value store is used with an invalid key."""

    pass


class RecordNotFoundError(BannerPosError):
    """Raised when a product or transaction id does not exist in its collection."""

    pass


class ReportError(BannerPosError):
    """Raised when a report cannot be produced."""

    pass


class NothingToExportError(ReportError):
    """Raised when an export is requested for a scope with no transactions.

    This is a recoverable, user-visible notice: the export does not proceed
    and no file is written.
    """

    pass
