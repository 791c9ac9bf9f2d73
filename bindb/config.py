from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class DecoderSettings(BaseSettings):
    # Single-byte codec keeps one character per byte
    text_encoding: str = Field("latin-1", validation_alias="BINDB_TEXT_ENCODING")
    strict_booleans: bool = Field(False, validation_alias="BINDB_STRICT_BOOLEANS")

    log_level: str = Field("WARNING", validation_alias="BINDB_LOG_LEVEL")
    log_ring_size: int = Field(200, validation_alias="BINDB_LOG_RING_SIZE")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> DecoderSettings:
    return DecoderSettings()
