"""Custom exception classes for the model code generator."""

from __future__ import annotations


class CodeGenerationError(Exception):
    """Base exception for model generation errors.

    All custom exceptions in the model code generator inherit from this class.
    """

    pass


class ConfigurationError(CodeGenerationError):
    """Error in application configuration.

    Raised when required configuration values are missing or invalid,
    such as a missing database URL when a database source is requested.

    Args:
        variable_name: The name of the configuration variable that caused the error
    """

    def __init__(self, variable_name: str) -> None:
        self.variable_name = variable_name
        message = f"Required configuration variable '{variable_name}' is not set"
        super().__init__(message)


class MetadataSourceError(CodeGenerationError):
    """Error while loading table metadata.

    Raised when a column metadata source cannot read or validate the
    table definitions it serves.

    Args:
        source: Description of the metadata source (URL or file path)
        errors: List of error messages
    """

    def __init__(self, source: str, errors: list[str]) -> None:
        self.source = source
        self.errors = errors
        super().__init__(f"Failed to load metadata from {source}: {'; '.join(errors)}")


class TableNotFoundError(CodeGenerationError):
    """Error when a requested table does not exist in the metadata source.

    Args:
        table_name: The table that was requested
    """

    def __init__(self, table_name: str) -> None:
        self.table_name = table_name
        super().__init__(f"Table '{table_name}' not found")


class BuilderStateError(CodeGenerationError):
    """Error when a builder is asked to render more than once.

    Builders accumulate output for exactly one table and must not be reused.
    """

    pass
