from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    app_name: str = Field(default="CWA Weather Proxy")
    env: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)

    # CWA open data (server-side only)
    cwa_api_key: str = ""
    cwa_api_base_url: str = Field(default="https://opendata.cwa.gov.tw/api")

settings = Settings()
