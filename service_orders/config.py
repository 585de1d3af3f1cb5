import os

from pydantic import BaseModel

ENV_PREFIX = "SERVICE_ORDERS_"


class Settings(BaseModel):
    app_title: str = "Repair Shop Service Orders"
    app_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> 'Settings':
        values = {
            name: os.environ[ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if ENV_PREFIX + name.upper() in os.environ
        }
        return cls(**values)
