from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    bot_token: str
    owner_telegram_id: int
    timezone: str
    db_path: Path
    notify_chat_id: Optional[int] = None


def _int_env(name: str, default: str = "0") -> int:
    raw = os.getenv(name, default).strip()
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


def load_settings() -> Settings:
    bot_token = os.getenv("BOT_TOKEN", "").strip()
    owner_id = _int_env("OWNER_TELEGRAM_ID")
    tz = os.getenv("TZ", "Europe/Helsinki").strip()
    db_raw = os.getenv("DB_PATH", "data/taskboard.db").strip()
    notify_raw = os.getenv("NOTIFY_CHAT_ID", "").strip()

    if not bot_token:
        raise RuntimeError("BOT_TOKEN missing in .env")
    if owner_id <= 0:
        raise RuntimeError("OWNER_TELEGRAM_ID missing/invalid in .env")

    # db_path may be relative; see resolve_db_path
    return Settings(
        bot_token=bot_token,
        owner_telegram_id=owner_id,
        timezone=tz,
        db_path=Path(db_raw),
        notify_chat_id=_int_env("NOTIFY_CHAT_ID") if notify_raw else None,
    )


def resolve_db_path(db_path: Path, base: Optional[Path] = None) -> Path:
    """Absolute DB path; relative values are taken from the working directory."""
    if db_path.is_absolute():
        return db_path
    return (base or Path.cwd()) / db_path
