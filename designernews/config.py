from os import getcwd
from os.path import exists, join
from typing import Optional
from pydantic import BaseModel, ValidationError
from .errors import ConfigException

config_path = join(getcwd(), "config.json")


class Config(BaseModel):
    base_url: str = "https://www.designernews.co"
    api_url: str = "https://api.designernews.co/api/v2"
    user_agent: str = "designernews-client/0.1"
    api_token: Optional[str] = None
    proxy: Optional[str] = None
    request_timeout: float = 30.0


def get_config(path: str = None) -> Config:
    path = path or config_path

    if not exists(path):
        return Config()

    try:
        with open(path, "r") as f:
            config_json = f.read().strip()

        return Config.model_validate_json(config_json or "{}")
    except (OSError, ValidationError) as e:
        raise ConfigException(f"Unable to load config from {path}: {e}") from e
