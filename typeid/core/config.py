"""Library configuration loaded from environment variables."""

import logging
from typing import Optional

from pydantic_settings import BaseSettings

# Longest prefix allowed by the TypeID format.
MAX_PREFIX_LENGTH = 63


class Settings(BaseSettings):
    # Validation
    max_prefix_length: int = MAX_PREFIX_LENGTH

    # Logging
    log_level: str = "WARNING"

    model_config = {"env_file": ".env", "env_prefix": "TYPEID_", "extra": "ignore"}


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for applications embedding the library.

    Never called on import; applications opt in.
    """
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
