"""
Web front end configuration settings.
"""

from pydantic_settings import BaseSettings


class WebConfig(BaseSettings):
    """Settings for the browser front end, read from WEB_* variables."""

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False

    # Backend API
    backend_host: str = "http://localhost:5500"
    request_timeout: float = 10.0

    model_config = {
        "env_prefix": "WEB_",
        "env_file": ".env",
        "extra": "ignore"
    }


# Global config instance
config = WebConfig()
