"""Exceptions shared across the specment pipeline."""


class SpecmentError(Exception):
    """Base exception for specment operations."""
    pass


class ValidationError(SpecmentError):
    """User input was rejected (project name, template, features)."""

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.value = value


class ConfigError(SpecmentError):
    """Synthesized configuration or target path preconditions are invalid."""

    def __init__(self, message: str, field: str = ""):
        super().__init__(message)
        self.field = field


class UserCancelledError(SpecmentError):
    """The user cancelled an interactive prompt."""

    def __init__(self, message: str = "Operation cancelled by user"):
        super().__init__(message)


class TemplateError(SpecmentError):
    """A template file could not be read or processed."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


# =============================================================================
# Dependency installation
# =============================================================================

class InstallError(SpecmentError):
    """Dependency installation failed. Always recoverable."""
    pass


class InstallTimeoutError(InstallError):
    """Package manager did not finish in time."""

    def __init__(self, message: str, timeout: int):
        super().__init__(message)
        self.timeout = timeout


class InstallCommandError(InstallError):
    """Package manager exited with a non-zero code."""

    def __init__(self, message: str, returncode: int, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
