import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Storage settings
    data_file: str = os.getenv("LIBRARY_DATA_FILE", "library_data.json")

    # Application settings
    app_name: str = os.getenv("APP_NAME", "Библиотека университета")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")

    # Logging settings
    log_level: str = os.getenv("LOG_LEVEL", "ERROR").upper()


settings = Settings()
