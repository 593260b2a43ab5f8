"""
Runtime settings read from the environment.

Environment Variables:
    TDUX_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) - default: INFO
    TDUX_LOG_FORMAT: Log format (json, text) - default: json
    TDUX_TEARDOWN_POLICY: What Emitter.destroy() cancels (wiring, all) - default: wiring
"""

import os
from dataclasses import dataclass

from .core.lifecycle import TeardownPolicy

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_format: str = "json"
    teardown_policy: TeardownPolicy = TeardownPolicy.WIRING_ONLY

    @staticmethod
    def from_env() -> "Settings":
        """
        Build settings from TDUX_* environment variables.

        Unknown log levels fall back to INFO and unknown formats to json,
        as logging must always come up.

        Raises:
            ValueError: If TDUX_TEARDOWN_POLICY is not "wiring" or "all"
        """
        log_level = os.getenv("TDUX_LOG_LEVEL", "INFO").upper()
        if log_level not in LOG_LEVELS:
            log_level = "INFO"

        log_format = os.getenv("TDUX_LOG_FORMAT", "json").lower()
        if log_format not in LOG_FORMATS:
            log_format = "json"

        raw_policy = os.getenv("TDUX_TEARDOWN_POLICY", TeardownPolicy.WIRING_ONLY.value).lower()
        try:
            policy = TeardownPolicy(raw_policy)
        except ValueError:
            raise ValueError(
                f"TDUX_TEARDOWN_POLICY must be one of "
                f"{[p.value for p in TeardownPolicy]}, got {raw_policy!r}"
            ) from None

        return Settings(log_level=log_level, log_format=log_format, teardown_policy=policy)
