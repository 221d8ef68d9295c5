"""Git helpers."""

from specment.git.utils import (
    GitError,
    GitNotInstalledError,
    GitTimeoutError,
    get_config_value,
    get_user_info,
    run_git,
)

__all__ = [
    "GitError",
    "GitNotInstalledError",
    "GitTimeoutError",
    "get_config_value",
    "get_user_info",
    "run_git",
]
