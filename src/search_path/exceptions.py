"""Custom exceptions for search_path."""


class SearchPathError(Exception):
    """Base exception for search_path."""


class EnvironmentVariableError(SearchPathError):
    """Environment variable is unset or its value is not valid text."""

    def __init__(self, name: str, cause: Exception):
        self.name = name
        self.cause = cause
        if isinstance(cause, KeyError):
            reason = "not set"
        elif isinstance(cause, UnicodeError):
            reason = "not valid Unicode"
        else:
            reason = str(cause)
        super().__init__(f"Environment variable {name!r} is {reason}")
