class IndexerError(Exception):
    """Base class for file indexer errors."""


class DirectoryAccessError(IndexerError):
    """A directory could not be enumerated; the walk skips it."""

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Error accessing {path}: {message}")


class InvalidRootPathError(DirectoryAccessError):
    pass


class SchemaCreationError(IndexerError):
    pass


class TransactionCommitError(IndexerError):
    """Raised after the insert transaction has been rolled back."""
