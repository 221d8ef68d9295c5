"""Git lookups used to fill README author details."""

import subprocess
from pathlib import Path
from typing import Dict, Optional

DEFAULT_GIT_TIMEOUT = 10


# =============================================================================
# Exceptions
# =============================================================================

class GitError(Exception):
    """Base exception for Git operations."""
    pass


class GitNotInstalledError(GitError):
    """Git is not installed or not in PATH."""
    pass


class GitTimeoutError(GitError):
    """Git command timed out."""

    def __init__(self, message: str, timeout: int):
        super().__init__(message)
        self.timeout = timeout


# =============================================================================
# Core Functions
# =============================================================================

def run_git(
    *args,
    cwd: Optional[Path] = None,
    timeout: int = DEFAULT_GIT_TIMEOUT
) -> subprocess.CompletedProcess:
    """Run a git command and capture its output.

    Raises:
        GitNotInstalledError: If git is not installed
        GitTimeoutError: If command times out
    """
    cmd = ["git"] + list(args)

    try:
        return subprocess.run(
            cmd,
            cwd=cwd or Path.cwd(),
            capture_output=True,
            text=True,
            timeout=timeout
        )
    except FileNotFoundError:
        raise GitNotInstalledError("Git is not installed or not in PATH")
    except subprocess.TimeoutExpired:
        raise GitTimeoutError(
            f"Git command timed out after {timeout}s: {' '.join(cmd)}",
            timeout=timeout
        )


def get_config_value(key: str, cwd: Optional[Path] = None) -> Optional[str]:
    """Read a git config value, or None if unset or git is unavailable."""
    try:
        result = run_git("config", key, cwd=cwd)
    except GitError:
        return None
    if result.returncode != 0:
        return None
    value = result.stdout.strip()
    return value or None


def get_user_info(cwd: Optional[Path] = None) -> Dict[str, str]:
    """Get user.name / user.email from git config.

    Missing values are left out of the result.
    """
    info = {}
    name = get_config_value("user.name", cwd=cwd)
    if name:
        info["name"] = name
    email = get_config_value("user.email", cwd=cwd)
    if email:
        info["email"] = email
    return info
