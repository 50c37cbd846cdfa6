from dataclasses import dataclass
import os
from typing import Optional


def _env_flag(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes')


def _env_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {value!r}") from None


@dataclass
class APIConfig:
    api_key: str = ''
    production: bool = False
    timeout: Optional[float] = None


@dataclass
class Config:
    verbose: bool = False
    api: APIConfig = None

    def __post_init__(self):
        if self.api is None:
            self.api = APIConfig()

    @classmethod
    def from_env(cls) -> 'Config':
        """
        Build configuration from environment variables.

        Reads NCAAFB_API_KEY, NCAAFB_PRODUCTION, NCAAFB_TIMEOUT and
        NCAAFB_VERBOSE. Only the CLI uses this; the client itself takes its
        settings as arguments.

        Raises:
            ValueError: if NCAAFB_TIMEOUT is set but not a number
        """
        return cls(
            verbose = _env_flag('NCAAFB_VERBOSE'),
            api=APIConfig(
                api_key = os.getenv('NCAAFB_API_KEY', ''),
                production = _env_flag('NCAAFB_PRODUCTION'),
                timeout = _env_float('NCAAFB_TIMEOUT'),
            )
        )
