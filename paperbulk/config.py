from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "paperbulk"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Basis size used when the preset is "custom" and no dimensions are given
    DEFAULT_PRESET: str = "woodfree-A"
    DEFAULT_BASIS_WIDTH_IN: float = 25.0
    DEFAULT_BASIS_HEIGHT_IN: float = 38.0

    # Inference engine — longest dependency chain is 2, so 3 passes has margin
    RESOLVE_PASSES: int = 3

    class Config:
        env_file = ".env"


settings = Settings()
