"""Find files and directories by name along an ordered list of directories."""

from search_path.environment import CURRENT_DIR
from search_path.environment import EXECUTABLE_PATH_VAR
from search_path.environment import PATH_DELIMITER
from search_path.exceptions import EnvironmentVariableError
from search_path.exceptions import SearchPathError
from search_path.models import SearchPath
from search_path.operations import which
from search_path.operations import which_all

__version__ = "0.1.0"

__all__ = [
    "CURRENT_DIR",
    "EXECUTABLE_PATH_VAR",
    "PATH_DELIMITER",
    "EnvironmentVariableError",
    "SearchPath",
    "SearchPathError",
    "which",
    "which_all",
]
