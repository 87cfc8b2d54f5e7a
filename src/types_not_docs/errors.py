"""Exceptions raised by the extraction pipeline and its configuration layer."""


class TypesNotDocsError(Exception):
    """Base class for all errors reported by types-not-docs."""


class ExtractionFailure(TypesNotDocsError):
    """A source file could not be parsed into documentation records."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(f"Failed to parse {file_path}: {reason}")
        self.file_path = file_path
        self.reason = reason


class EmptyResultError(TypesNotDocsError):
    """Nothing was found to document."""


class ConfigurationError(TypesNotDocsError):
    """An invalid configuration option was supplied."""


class OutputError(TypesNotDocsError):
    """The generated document could not be written."""
