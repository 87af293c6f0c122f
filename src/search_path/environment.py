"""Path delimiter handling and environment variable access."""

import os

from search_path.exceptions import EnvironmentVariableError

PATH_DELIMITER = os.pathsep  # ';' on Windows, ':' elsewhere
CURRENT_DIR = os.curdir
EXECUTABLE_PATH_VAR = "PATH"


def read_env_var(name: str) -> str:
    """Read an environment variable as text.

    Args:
        name: Name of the environment variable

    Returns:
        The variable's value

    Raises:
        EnvironmentVariableError: If the variable is unset, or holds bytes
            that do not decode as Unicode
    """
    try:
        value = os.environ[name]
        # Undecodable bytes come through os.environ as lone surrogates
        value.encode("utf-8")
    except (KeyError, UnicodeEncodeError) as e:
        raise EnvironmentVariableError(name, e) from e
    return value


def split_text(text: str) -> list[str]:
    """Split delimited path text into its non-blank segments.

    Segments that are empty or whitespace-only are dropped; the rest are
    kept verbatim, in order.
    """
    return [segment for segment in text.split(PATH_DELIMITER) if segment.strip()]
