"""Runtime configuration read from the environment."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from . import constants


def default_workspace_root() -> Path:
    return Path(tempfile.gettempdir()) / constants.DEFAULT_WORKSPACE_DIRNAME


@dataclass(frozen=True)
class TutorConfig:
    """Settings shared by the CLI commands.

    An empty ``model`` lets the client pick its own default; ``timeout`` of
    None leaves subprocesses unbounded.
    """

    provider: str = constants.DEFAULT_PROVIDER
    model: str = constants.DEFAULT_OLLAMA_MODEL
    base_url: str = constants.DEFAULT_OLLAMA_URL
    workspace_root: Path = default_workspace_root()
    timeout: float | None = None
    max_tokens: int = constants.LESSON_MAX_TOKENS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TutorConfig:
        """Build a config from ``TUTOR_*`` and ``OLLAMA_*`` variables.

        Raises ``ValueError`` if ``TUTOR_TIMEOUT`` is not a positive number.
        """
        env = os.environ if environ is None else environ
        provider = env.get("TUTOR_PROVIDER", constants.DEFAULT_PROVIDER).strip().lower()
        if provider == "ollama":
            model = env.get("OLLAMA_MODEL", constants.DEFAULT_OLLAMA_MODEL)
        else:
            model = env.get("TUTOR_MODEL", "")
        workspace = env.get("TUTOR_WORKSPACE", "")
        return cls(
            provider=provider,
            model=model,
            base_url=env.get("OLLAMA_URL", constants.DEFAULT_OLLAMA_URL),
            workspace_root=Path(workspace) if workspace else default_workspace_root(),
            timeout=_parse_timeout(env.get("TUTOR_TIMEOUT", "")),
        )


def _parse_timeout(raw: str) -> float | None:
    if not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"TUTOR_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if timeout <= 0:
        raise ValueError(f"TUTOR_TIMEOUT must be positive, got {raw!r}")
    return timeout
