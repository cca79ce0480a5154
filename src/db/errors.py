"""Errors raised by the data-access layer."""


class QueryError(Exception):
    """A database query failed."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"{operation} failed: {message}")
