"""Runtime configuration for specment.

Values come from defaults, optionally overridden by environment variables:

- SPECMENT_INSTALL_TIMEOUT   seconds before the package manager is killed
- SPECMENT_PACKAGE_MANAGER   fallback when no lockfile is found
- SPECMENT_ORGANIZATION      organization used in the public site URL
- CI / GITHUB_ACTIONS        switches the site URL to the public one
"""

import logging
import os
from dataclasses import dataclass, asdict
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_INSTALL_TIMEOUT = 5 * 60
DEFAULT_PACKAGE_MANAGER = "npm"
DEFAULT_ORGANIZATION = "your-org"
DEFAULT_DEV_URL = "http://localhost:3000"

_TRUTHY = ("1", "true", "yes")


@dataclass
class SpecmentConfig:
    """Configuration for a single specment run."""

    install_timeout_seconds: int = DEFAULT_INSTALL_TIMEOUT
    default_package_manager: str = DEFAULT_PACKAGE_MANAGER
    organization: str = DEFAULT_ORGANIZATION
    dev_url: str = DEFAULT_DEV_URL
    ci: bool = False

    def public_url(self) -> str:
        return f"https://{self.organization}.github.io"

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "SpecmentConfig":
        return cls(**{
            k: v for k, v in data.items()
            if k in cls.__dataclass_fields__
        })

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SpecmentConfig":
        """Build a config from environment variables."""
        env = os.environ if environ is None else environ
        config = cls()

        timeout = env.get("SPECMENT_INSTALL_TIMEOUT")
        if timeout:
            try:
                config.install_timeout_seconds = int(timeout)
            except ValueError:
                logger.warning("Ignoring invalid SPECMENT_INSTALL_TIMEOUT: %s", timeout)

        if env.get("SPECMENT_PACKAGE_MANAGER"):
            config.default_package_manager = env["SPECMENT_PACKAGE_MANAGER"]
        if env.get("SPECMENT_ORGANIZATION"):
            config.organization = env["SPECMENT_ORGANIZATION"]

        config.ci = is_ci_environment(env)
        return config


def is_ci_environment(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Check whether we run inside CI / automation."""
    env = os.environ if environ is None else environ
    return any(
        env.get(name, "").lower() in _TRUTHY
        for name in ("CI", "GITHUB_ACTIONS")
    )
