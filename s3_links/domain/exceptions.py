"""Errors raised by the S3 links repository."""


class RepositoryError(Exception):
    """Base class for errors reported to the host."""
    pass


class MissingCredentialsError(RepositoryError):
    """Raised when no access key is configured."""

    def __init__(self, message: str = "An Amazon S3 access key is required to browse this repository"):
        super().__init__(message)


class RemoteCommunicationError(RepositoryError):
    """Raised when the object store could not be reached or refused a request."""

    def __init__(self, repository_name: str, detail: str):
        self.repository_name = repository_name
        self.detail = detail
        super().__init__(f"Error while communicating with the repository '{repository_name}': {detail}")


class ObjectStoreError(Exception):
    """Raised when object store operations fail."""
    pass
