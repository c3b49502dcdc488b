from pydantic_settings import BaseSettings

from shipstation.models import DEFAULT_API_URL


class Settings(BaseSettings):
    api_key: str = ""
    api_secret: str = ""
    api_url: str = DEFAULT_API_URL
    partner_key: str = ""
    timeout: float = 30.0
    log_format: str = "text"
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "SHIPSTATION_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
