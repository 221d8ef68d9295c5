"""Dependency installation in the generated project."""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from specment.config import DEFAULT_INSTALL_TIMEOUT, DEFAULT_PACKAGE_MANAGER
from specment.errors import InstallCommandError, InstallError, InstallTimeoutError

logger = logging.getLogger(__name__)

# Checked in order; first match wins.
LOCKFILES = (
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
    ("bun.lockb", "bun"),
    ("bun.lock", "bun"),
    ("package-lock.json", "npm"),
)


def detect_package_manager(start: Path, default: str = DEFAULT_PACKAGE_MANAGER) -> str:
    """Infer the package manager from lockfiles in ``start`` and its parents."""
    start = Path(start).resolve()
    for directory in [start, *start.parents]:
        for lockfile, manager in LOCKFILES:
            if (directory / lockfile).exists():
                logger.debug("Found %s in %s, using %s", lockfile, directory, manager)
                return manager
    return default


def install_command(package_manager: str) -> List[str]:
    return [package_manager, "install"]


def install_dependencies(
    project_path: Path,
    package_manager: Optional[str] = None,
    timeout: int = DEFAULT_INSTALL_TIMEOUT,
    verbose: bool = False,
) -> None:
    """Run the package manager's install in ``project_path``.

    The child is killed when ``timeout`` expires.

    Raises:
        InstallTimeoutError: If the install did not finish in time
        InstallCommandError: If the package manager exited non-zero
        InstallError: If the package manager could not be started
    """
    manager = package_manager or detect_package_manager(Path(project_path).parent)
    cmd = install_command(manager)
    cmd_str = " ".join(cmd)
    logger.debug("Running '%s' in %s (timeout %ss)", cmd_str, project_path, timeout)

    try:
        result = subprocess.run(
            cmd,
            cwd=project_path,
            capture_output=not verbose,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise InstallError(f"Failed to execute install command: {manager} not found in PATH") from e
    except OSError as e:
        raise InstallError(f"Failed to execute install command: {cmd_str}: {e}") from e
    except subprocess.TimeoutExpired:
        raise InstallTimeoutError(
            f"Installation timed out after {timeout}s: {cmd_str}",
            timeout=timeout,
        )

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        message = f"Installation failed with exit code {result.returncode}"
        if stderr:
            message += f"\n{stderr}"
        raise InstallCommandError(message, returncode=result.returncode, stderr=stderr)
