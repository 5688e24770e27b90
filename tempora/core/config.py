"""
Settings — конфигурация tempora через Pydantic Settings

Переменные окружения с префиксом TEMPORA_:
- TEMPORA_LEAP_SECONDS_PATH: путь к JSON таблице leap seconds
  (по умолчанию — встроенный tempora/leap/data/leap_seconds.json)
- TEMPORA_WARN_ON_EXPIRED_LEAP_TABLE: warning в лог при устаревшей таблице
"""

from functools import lru_cache
from pathlib import Path
from typing import Final, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LEAP_SECONDS_PATH: Final[Path] = Path(__file__).parent.parent / "leap" / "data" / "leap_seconds.json"


class TemporaSettings(BaseSettings):
    """Конфигурация загрузки leap seconds"""

    leap_seconds_path: Optional[Path] = Field(
        default=None, description="Путь к JSON таблице leap seconds (None — встроенная)"
    )
    warn_on_expired_leap_table: bool = Field(
        default=True, description="Логировать warning, если срок таблицы истёк"
    )

    model_config = SettingsConfigDict(env_prefix="TEMPORA_", frozen=True)

    def resolved_leap_seconds_path(self) -> Path:
        return (self.leap_seconds_path or DEFAULT_LEAP_SECONDS_PATH).resolve()


@lru_cache(maxsize=1)
def get_settings() -> TemporaSettings:
    """Кэшированный экземпляр настроек (читается из окружения один раз)."""
    return TemporaSettings()
