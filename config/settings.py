""" Module to load environment variables """
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Settings class to load environment variables"""
    model_config = SettingsConfigDict(env_prefix='')

    LOG_LEVEL: str = 'DEBUG'
    DEFAULT_VIEW_RANGE: str = '1M'
    MONTH_AND_DAY_FORMAT: str = '%B %d, %Y'
    TRANSLATIONS_PATH: str = str(CONFIG_DIR / 'lang' / 'en_US.json')
    INTRO_CONFIG_PATH: str = str(CONFIG_DIR / 'intro.json')
    PACKAGES_MANIFEST_PATH: str = 'installed.json'
    DISABLED_FUNCTIONS: str = ''
    FORBIDDEN_FUNCTIONS: List[str] = ['proc_close']

settings = Settings()
