"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from dotenv import find_dotenv, load_dotenv

from .errors import MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def load_env_file(path: str | Path | None = None) -> bool:
    """Populate ``os.environ`` from a ``.env`` file without overriding set values.

    With ``path=None`` the nearest ``.env`` above the working directory is used.
    Returns whether a file defining at least one variable was found.
    """

    if path is None:
        path = find_dotenv(usecwd=True)
    return load_dotenv(dotenv_path=path, override=False)


def require_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return the named environment variables, raising if any is missing or blank."""

    values: dict[str, str] = {}
    missing: list[str] = []
    for name in names:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            missing.append(name)
        else:
            values[name] = raw.strip()

    if missing:
        raise MissingConfigurationError(f"Missing configuration for: {', '.join(sorted(missing))}")

    return values


def require_env_var(name: str) -> str:
    return require_env_vars((name,))[name]
