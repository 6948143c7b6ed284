# fabric_erp/config.py

import os
import logging
import logging.config
from decimal import Decimal
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()

# --- Database Configuration ---
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))  # fabric_erp/ -> repo root
DATA_DIR = os.path.join(BASE_DIR, "data")
DB_NAME = "fabric_erp.db"


class Settings(BaseSettings):
    DATABASE_PATH: str = os.getenv("DATABASE_PATH", os.path.join(DATA_DIR, DB_NAME))

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE_PATH: Optional[str] = os.getenv("LOG_FILE_PATH") or None

    # --- Order / invoice computation ---
    ROUND_OFF_UNIT: Decimal = Decimal(os.getenv("ROUND_OFF_UNIT", "1"))
    DUE_SOON_WINDOW_DAYS: int = int(os.getenv("DUE_SOON_WINDOW_DAYS", "14"))
    CLAMP_FIXED_DISCOUNT: bool = os.getenv("CLAMP_FIXED_DISCOUNT", "true").lower() in ("1", "true", "yes")

    class Config:
        env_file = ".env"

    def refresh(self):
        """Reload environment variables"""
        load_dotenv(override=True)
        return Settings()


settings = Settings()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s'


def build_logging_config(level: Optional[str] = None, log_file_path: Optional[str] = None) -> dict:
    level_name = (level or settings.LOG_LEVEL).upper()
    config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': LOG_FORMAT,
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'standard',
                'level': level_name,
                'stream': 'ext://sys.stderr',
            },
        },
        'root': {
            'handlers': ['console'],
            'level': level_name,
        },
    }
    log_file_path = log_file_path or settings.LOG_FILE_PATH
    if log_file_path:
        log_dir = os.path.dirname(log_file_path)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        config['handlers']['file'] = {
            'class': 'logging.handlers.RotatingFileHandler',
            'formatter': 'standard',
            'filename': log_file_path,
            'maxBytes': 1024 * 1024 * 5,  # 5 MB
            'backupCount': 5,
            'level': logging.INFO,
            'encoding': 'utf-8',
        }
        config['root']['handlers'].append('file')
    return config


LOGGING_CONFIG = build_logging_config()


def setup_logging(level: Optional[str] = None) -> None:
    logging.config.dictConfig(build_logging_config(level))
