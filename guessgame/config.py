"""Settings for guessgame runs.

Defaults come from GUESSGAME_* environment variables; the CLI layers its
options on top with Settings.override().
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from guessgame.models import ConfigError

DEFAULT_MIN_SECRET = 0
DEFAULT_MAX_SECRET = 100
DEFAULT_QUIT_TOKEN = "quit"


@dataclass(frozen=True)
class Settings:
    """Everything a session needs to know before it starts."""

    min_secret: int = DEFAULT_MIN_SECRET
    max_secret: int = DEFAULT_MAX_SECRET
    quit_token: str = DEFAULT_QUIT_TOKEN
    seed: Optional[int] = None
    secret: Optional[int] = None
    verbose: bool = False

    def override(self, **changes: object) -> Settings:
        """Return a copy with every non-None change applied, then validate it."""
        applied = {k: v for k, v in changes.items() if v is not None}
        return validate(replace(self, **applied))


def _int_var(env: Mapping[str, str], key: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from None


def validate(settings: Settings) -> Settings:
    """Check cross-field constraints, raising ConfigError on the first failure."""
    if settings.min_secret > settings.max_secret:
        raise ConfigError(
            f"min ({settings.min_secret}) must not be greater than max ({settings.max_secret})"
        )
    if not settings.quit_token.strip():
        raise ConfigError("quit token must not be empty")
    if settings.secret is not None and not (
        settings.min_secret <= settings.secret <= settings.max_secret
    ):
        raise ConfigError(
            f"secret {settings.secret} is outside [{settings.min_secret},{settings.max_secret}]"
        )
    return settings


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Args:
        env: Mapping to read instead of os.environ (tests pass a dict).

    Raises:
        ConfigError: a variable is not an integer or the range is empty.
    """
    env = os.environ if env is None else env
    settings = Settings(
        min_secret=_int_var(env, "GUESSGAME_MIN", DEFAULT_MIN_SECRET),
        max_secret=_int_var(env, "GUESSGAME_MAX", DEFAULT_MAX_SECRET),
        quit_token=env.get("GUESSGAME_QUIT_TOKEN", DEFAULT_QUIT_TOKEN).strip().lower(),
        seed=_int_var(env, "GUESSGAME_SEED", None),
    )
    return validate(settings)
