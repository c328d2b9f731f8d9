from functools import lru_cache
from typing import Literal, final

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class APIConfig(BaseModel):
    title: str = "BrowserScan API"
    version: str = "1.0.0"
    port: int = 8000
    host: str = "0.0.0.0"
    allowed_hosts: list[str] = ["*"]
    api_key: str | None = None


class ScanConfig(BaseModel):
    report_version: str = "1.0.0"
    bot_penalty_enabled: bool = True


@final
class Config(BaseSettings):
    model_config: SettingsConfigDict = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="APP__",
        env_nested_delimiter="__",
        extra="ignore",
    )

    env: Literal["local", "dev", "prod"] = "local"

    api: APIConfig = APIConfig()
    scan: ScanConfig = ScanConfig()


@lru_cache
def get_config() -> Config:
    return Config()
