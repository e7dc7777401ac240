class InitializrError(Exception):
    """Base exception for all initializr errors outside the version core."""

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(message)


class InitializrClientError(InitializrError):
    """Raised when talking to the project generation service fails."""


class MetadataFetchError(InitializrClientError):
    """Raised when the client metadata cannot be fetched or decoded."""


class StarterDownloadError(InitializrClientError):
    """Raised when the generated project archive cannot be downloaded."""


class ArchiveError(InitializrError):
    """Raised when writing or extracting the project archive fails."""
