"""Configuration management for safefunc."""

import os
import logging
from typing import Optional
from dataclasses import dataclass

from dotenv import load_dotenv, find_dotenv

LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class Config:
    """Configuration for safefunc logging.

    Merges environment variables with explicit arguments.
    Explicit arguments take precedence over environment variables.
    """

    log_level: str = 'WARNING'
    log_file: Optional[str] = None

    @classmethod
    def from_env(
        cls,
        log_level: Optional[str] = None,
        log_file: Optional[str] = None,
        env_file: Optional[str] = None
    ) -> 'Config':
        """Create config from environment variables and arguments.

        A .env file is loaded first; variables already set in the
        environment are not overridden by it.

        Args:
            log_level: Logging level name (overrides SAFEFUNC_LOG_LEVEL)
            log_file: Log file path (overrides SAFEFUNC_LOG_FILE)
            env_file: Path to a .env file (default: search from cwd)

        Returns:
            Config instance

        Raises:
            ValueError: If the log level is unknown
        """
        load_dotenv(env_file or find_dotenv(usecwd=True))

        final_level = (log_level or os.getenv('SAFEFUNC_LOG_LEVEL') or 'WARNING').upper()
        final_file = log_file or os.getenv('SAFEFUNC_LOG_FILE') or None

        if final_level not in LEVELS:
            raise ValueError(
                f"Unknown log level: {final_level}. "
                f"Available: {', '.join(LEVELS)}"
            )

        return cls(log_level=final_level, log_file=final_file)

    @property
    def level(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.log_level)
