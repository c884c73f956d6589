"""Configuration helpers for loading environment variables.

Variables defined in a project-level ``.env`` file are loaded before they are
read.  Consumers should rely on :func:`get_env` or :func:`load_settings`
instead of using :func:`os.getenv` directly so that the configuration is
loaded in a single, well-defined place.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@lru_cache(maxsize=1)
def _load_environment() -> None:
    """Load environment variables from the project's ``.env`` file.

    The loader first attempts to read ``.env`` from the repository root.  If
    the file does not exist :func:`load_dotenv` still runs its default
    discovery.  Subsequent calls are cached so the file is only read once per
    process.
    """

    project_root = Path(__file__).resolve().parents[1]
    env_path = project_root / ".env"

    if env_path.exists():
        load_dotenv(env_path, override=False)
    else:
        load_dotenv(override=False)


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Return the value for ``key`` from the environment.

    Parameters
    ----------
    key:
        The name of the environment variable to look up.
    default:
        The value to return when ``key`` is not present.
    """

    _load_environment()
    return os.environ.get(key, default)


def _get_flag(key: str, default: bool) -> bool:
    value = get_env(key)
    if value is None:
        return default
    value = value.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return default


@dataclass(frozen=True)
class GraphSettings:
    """Runtime switches consulted by :class:`arenagraph.graph.store.Graph`."""

    record_events: bool = False
    log_mutations: bool = True


def load_settings() -> GraphSettings:
    """Build :class:`GraphSettings` from ``ARENAGRAPH_*`` variables."""

    return GraphSettings(
        record_events=_get_flag("ARENAGRAPH_RECORD_EVENTS", False),
        log_mutations=_get_flag("ARENAGRAPH_LOG_MUTATIONS", True),
    )


__all__ = ["GraphSettings", "get_env", "load_settings"]
