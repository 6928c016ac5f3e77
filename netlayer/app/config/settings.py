from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Logs outgoing/incoming URLs and pretty-printed JSON bodies at debug level.
    log_http_traffic: bool = Field(False, validation_alias="LOG_HTTP_TRAFFIC")
    default_user_agent: str = Field("", validation_alias="DEFAULT_USER_AGENT")

    image_cache_max_entries: int = Field(256, validation_alias="IMAGE_CACHE_MAX_ENTRIES")
