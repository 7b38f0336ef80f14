"""Settings for union definitions.

All settings can be overridden via environment variables with the TAGUNION_
prefix. Example: TAGUNION_STRICT_ARMS=true
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class UnionSettings(BaseSettings):
    """Behaviour of the union builder."""

    model_config = {"env_prefix": "TAGUNION_"}

    strict_arms: bool = Field(
        default=False,
        description="Raise instead of overwriting when an arm is registered twice",
    )
    log_overwrites: bool = Field(
        default=True,
        description="Emit a debug log record when an arm is overwritten",
    )


def get_settings(**overrides: object) -> UnionSettings:
    """Read settings from the environment, applying explicit overrides."""
    return UnionSettings(**overrides)  # type: ignore[arg-type]
