import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _env_float(name: str, default: str) -> float:
    return float(os.getenv(name, default))


def _env_int(name: str, default: str) -> int:
    return int(os.getenv(name, default))


@dataclass
class Settings:
    # Lending
    fine_per_day: float = field(default_factory=lambda: _env_float("LIBRANET_FINE_PER_DAY", "10.0"))
    default_loan_days: int = field(default_factory=lambda: _env_int("LIBRANET_DEFAULT_LOAN_DAYS", "14"))

    # Reporting
    currency: str = field(default_factory=lambda: os.getenv("LIBRANET_CURRENCY", "Rs"))
    log_level: str = field(default_factory=lambda: os.getenv("LIBRANET_LOG_LEVEL", "WARNING").upper())

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current environment (re-read on every call)."""
        return cls()


settings = Settings()
