"""
Runtime settings for fetching the data center page.

Values come from keyword arguments or from DATACENTER_* environment
variables.  Entry-point scripts call load_dotenv() first so a local
.env file is picked up.
"""

import logging
import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_URL = "https://www.thghosting.com/network/data-centers/"
DEFAULT_USER_AGENT = "datacenter-parser/0.1 (+https://pypi.org/project/requests/)"

ENV_PREFIX = "DATACENTER_"


class Settings(BaseModel):
    """Fetch and logging configuration."""
    url: str = DEFAULT_URL
    timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds")
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, **overrides) -> "Settings":
        """
        Build settings from the environment.

        Explicit keyword overrides win over environment variables; None
        overrides are ignored so argparse defaults can be passed straight in.
        """
        values = {}
        for name in cls.model_fields:
            env_value: Optional[str] = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if env_value:
                values[name] = env_value
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
