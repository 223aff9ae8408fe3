from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings

from nslogger.parsing.parts.decode import DEFAULT_TIMESTAMP_FORMAT


class DecoderSettings(BaseSettings):
    separator: str = Field(",", validation_alias="NSLOGGER_SEPARATOR")
    output_format: Literal["text", "json"] = Field("text", validation_alias="NSLOGGER_OUTPUT_FORMAT")
    output_suffix: str = Field(".txt", validation_alias="NSLOGGER_OUTPUT_SUFFIX")
    timestamp_format: str = Field(DEFAULT_TIMESTAMP_FORMAT, validation_alias="NSLOGGER_TIMESTAMP_FORMAT")

    # Stop when a message reaches the end of the buffer instead of decoding it.
    legacy_boundary: bool = Field(False, validation_alias="NSLOGGER_LEGACY_BOUNDARY")
    strict_frame_size: bool = Field(False, validation_alias="NSLOGGER_STRICT_FRAME_SIZE")
    allow_user_keys: bool = Field(False, validation_alias="NSLOGGER_ALLOW_USER_KEYS")

    log_level: str = Field("WARNING", validation_alias="NSLOGGER_LOG_LEVEL")
    log_ring_size: int = Field(200, validation_alias="NSLOGGER_LOG_RING_SIZE")
    log_file: Optional[str] = Field(None, validation_alias="NSLOGGER_LOG_FILE")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> DecoderSettings:
    return DecoderSettings()
