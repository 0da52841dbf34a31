from typing import Literal

from pydantic_settings import BaseSettings

LogFormat = Literal['text', 'json']


class Settings(BaseSettings):
    model_config = {
        'extra': 'ignore',
        'env_file': '.env',
        'env_file_encoding': 'utf-8',
        'frozen': True,
    }

    SERVICE_NAME: str = 'metricset'
    SERVICE_VERSION: str = '0.1.0'
    LOG_LEVEL: str = 'INFO'
    LOG_FORMAT: LogFormat = 'text'


settings = Settings()
