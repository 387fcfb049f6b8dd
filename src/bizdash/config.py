"""Application configuration resolved from overrides and environment variables."""

import os
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Mapping, Optional

from bizdash.domain.errors import ValidationError, field_error
from bizdash.utils.amount_parser import parse_amount

DEFAULT_HOURLY_RATE = Decimal("75")
DEFAULT_PROFIT_MARGIN = Decimal("1.3")
DEFAULT_USER = "local"

ENV_DB_PATH = "BIZDASH_DB_PATH"
ENV_USER = "BIZDASH_USER"
ENV_HOURLY_RATE = "BIZDASH_HOURLY_RATE"
ENV_PROFIT_MARGIN = "BIZDASH_PROFIT_MARGIN"
ENV_LOG_LEVEL = "BIZDASH_LOG_LEVEL"
ENV_LOG_FILE = "BIZDASH_LOG_FILE"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for one bizdash session."""

    database_path: str
    user_id: str = DEFAULT_USER
    hourly_rate: Decimal = DEFAULT_HOURLY_RATE
    profit_margin: Decimal = DEFAULT_PROFIT_MARGIN
    log_level: str = "WARNING"
    log_file: Optional[str] = None


def default_database_path() -> str:
    """Return ~/.bizdash/bizdash.db, creating the directory if needed."""
    db_dir = Path.home() / ".bizdash"
    db_dir.mkdir(exist_ok=True)
    return str(db_dir / "bizdash.db")


def load_settings(
    database_path: Optional[str] = None,
    user_id: Optional[str] = None,
    log_level: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Build Settings from explicit values, then environment, then defaults.

    Args:
        database_path: Overrides BIZDASH_DB_PATH
        user_id: Overrides BIZDASH_USER
        log_level: Overrides BIZDASH_LOG_LEVEL
        environ: Environment mapping (defaults to os.environ)

    Raises:
        ValidationError: If a numeric setting is not a positive number
    """
    env = os.environ if environ is None else environ

    database_path = database_path or env.get(ENV_DB_PATH) or default_database_path()
    user_id = user_id or env.get(ENV_USER) or DEFAULT_USER

    return Settings(
        database_path=database_path,
        user_id=user_id,
        hourly_rate=_positive_decimal(env, ENV_HOURLY_RATE, DEFAULT_HOURLY_RATE),
        profit_margin=_positive_decimal(env, ENV_PROFIT_MARGIN, DEFAULT_PROFIT_MARGIN),
        log_level=(log_level or env.get(ENV_LOG_LEVEL) or "WARNING").upper(),
        log_file=env.get(ENV_LOG_FILE) or None,
    )


def _positive_decimal(env: Mapping[str, str], name: str, default: Decimal) -> Decimal:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = parse_amount(raw)
    except ValueError:
        raise field_error(name, f"{name} must be a number, got '{raw}'.") from None
    if value <= 0:
        raise ValidationError({name: f"{name} must be greater than zero."})
    return value
