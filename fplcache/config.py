"""Run configuration for the FPL cache builder."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from .constants import DEFAULT_OUTPUT_PATH, FPL_BASE_URL, REQUEST_TIMEOUT_MS


class PipelineConfig(BaseModel):
    """
    Settings for one fetch run.

    ``user_id`` is the FPL entry (team) id. Leaving it unset is a normal
    configuration: the squad section of the snapshot is simply skipped.
    """

    base_url: str = FPL_BASE_URL
    user_id: Optional[str] = None
    output_path: Path = DEFAULT_OUTPUT_PATH
    request_timeout_ms: int = Field(REQUEST_TIMEOUT_MS, ge=1)

    @field_validator('base_url')
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.rstrip('/')

    @field_validator('user_id', mode='before')
    @classmethod
    def blank_user_id_as_none(cls, v):
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @property
    def request_timeout(self) -> float:
        """Timeout in seconds, as ``requests`` expects it."""
        return self.request_timeout_ms / 1000

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'PipelineConfig':
        """
        Build config from environment variables.

        Recognized variables:
            FPL_BASE_URL: API root (default: public FPL API)
            FPL_TEAM_ID: Entry id whose squad to include (optional)
            FPL_OUTPUT_PATH: Where to write the snapshot (default: data/cache.json)
            FPL_REQUEST_TIMEOUT_MS: Per-request timeout (default: 15000)

        Raises:
            ValueError: If FPL_REQUEST_TIMEOUT_MS is not an integer
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {'user_id': env.get('FPL_TEAM_ID')}

        if env.get('FPL_BASE_URL'):
            values['base_url'] = env['FPL_BASE_URL']
        if env.get('FPL_OUTPUT_PATH'):
            values['output_path'] = Path(env['FPL_OUTPUT_PATH'])

        timeout = env.get('FPL_REQUEST_TIMEOUT_MS')
        if timeout:
            try:
                values['request_timeout_ms'] = int(timeout)
            except ValueError as e:
                raise ValueError(f'FPL_REQUEST_TIMEOUT_MS must be an integer, got {timeout!r}') from e

        return cls(**values)


@lru_cache(maxsize=1)
def get_config() -> PipelineConfig:
    """
    Load configuration from the process environment.

    Configuration is cached after first load.

    Example:
        from fplcache.config import get_config
        config = get_config()
        print(f"Writing to {config.output_path}")
    """
    return PipelineConfig.from_env()


def clear_config_cache() -> None:
    """Clear the configuration cache so the environment is re-read."""
    get_config.cache_clear()
