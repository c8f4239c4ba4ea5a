"""Application settings read from the environment."""
import os
from dataclasses import dataclass
from typing import Optional

from shopcart.logging import DEFAULT_LOG_LEVEL, get_logger
from shopcart.money import CURRENCY_SYMBOLS, DEFAULT_CURRENCY

logger = get_logger(__name__)


@dataclass(frozen=True)
class Settings:
    """Runtime settings. CLI flags override these via `with_overrides`."""
    currency: str = DEFAULT_CURRENCY
    log_level: str = DEFAULT_LOG_LEVEL
    job_scale: float = 1.0

    @classmethod
    def from_env(cls) -> "Settings":
        currency = os.environ.get("SHOPCART_CURRENCY", DEFAULT_CURRENCY).upper()
        if currency not in CURRENCY_SYMBOLS:
            logger.warning(f"Unknown currency {currency!r}, amounts will use the code as suffix")

        raw_scale = os.environ.get("SHOPCART_JOB_SCALE", "1.0")
        try:
            job_scale = float(raw_scale)
        except ValueError:
            logger.warning(f"Invalid SHOPCART_JOB_SCALE {raw_scale!r}, using 1.0")
            job_scale = 1.0
        if job_scale < 0:
            logger.warning(f"Negative SHOPCART_JOB_SCALE {raw_scale!r}, using 1.0")
            job_scale = 1.0

        return cls(
            currency=currency,
            log_level=os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            job_scale=job_scale,
        )

    def with_overrides(
        self,
        currency: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> "Settings":
        return Settings(
            currency=(currency or self.currency).upper(),
            log_level=(log_level or self.log_level).upper(),
            job_scale=self.job_scale,
        )


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get Settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
