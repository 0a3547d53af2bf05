from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from .errors import InvalidArgument

MIN_NUMBER = 1
MAX_NUMBER = 49
NUMBERS_PER_TICKET = 6
DEFAULT_COUNT = 5

_COUNT_RE = re.compile(r"^[+-]?\d+$", re.ASCII)


# ملخص: يحوّل نص عدد التذاكر إلى عدد صحيح موجب أو يرفع InvalidArgument.
def parse_count(raw: Optional[str]) -> int:
    if raw is None:
        return DEFAULT_COUNT
    text = str(raw).strip()
    if not _COUNT_RE.match(text):
        raise InvalidArgument(f"Invalid ticket count {raw!r}. Must be a positive integer.")
    count = int(text)
    if count <= 0:
        raise InvalidArgument(f"Invalid ticket count {raw!r}. Must be a positive integer.")
    return count


# ملخص: إعدادات التشغيل تأتي من سطر الأوامر فقط، بلا متغيرات بيئية ولا ملفات.
class Settings(BaseSettings):
    model_config = SettingsConfigDict(validate_default=True)

    count: int = DEFAULT_COUNT
    unique: bool = False
    seed: Optional[int] = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)

    @field_validator("count", mode="before")
    @classmethod
    def normalize_count(cls, value: Any) -> int:
        if value is None or isinstance(value, str):
            return parse_count(value)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError("count must be a positive integer")
        return value

    @field_validator("seed", mode="before")
    @classmethod
    def normalize_seed(cls, value: Any) -> Optional[int]:
        if value is None:
            return None
        try:
            return int(str(value).strip())
        except ValueError:
            raise ValueError(f"invalid seed {value!r}") from None


def load_settings(**values: Any) -> Settings:
    try:
        return Settings(**values)
    except ValidationError as e:
        err = e.errors()[0]
        cause = err.get("ctx", {}).get("error")
        raise InvalidArgument(str(cause) if cause else err["msg"]) from None
