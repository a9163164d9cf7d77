from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_title: str = "Devlog"
    app_version: str = "1.0.0"

    # Каталог с постами (front matter + тело)
    posts_dir: Path = Path("posts")
    posts_extension: str = ".mdx"

    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
