# SPDX-License-Identifier: MIT
"""CLI configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    value = env.get(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class CLIConfig:
    """Settings for the ``semver`` command.

    Attributes:
        verbose: Log debug messages to stderr
        color: Colour error, warning and success messages
    """

    verbose: bool = False
    color: bool = True

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "CLIConfig":
        """Create configuration from environment variables.

        ``SEMVER_VERBOSE`` enables debug logging. ``SEMVER_COLOR`` turns
        coloured output on or off; when it is unset, a non-empty ``NO_COLOR``
        turns it off (https://no-color.org/).
        """
        if env is None:
            env = os.environ

        config = cls()
        config.verbose = _env_flag(env, "SEMVER_VERBOSE", config.verbose)

        if env.get("SEMVER_COLOR"):
            config.color = _env_flag(env, "SEMVER_COLOR", config.color)
        elif env.get("NO_COLOR"):
            config.color = False

        return config
