"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    codeblocks_env: str = "development"
    codeblocks_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Layout defaults, used when a request leaves them out
    block_height: int = 20
    code_block_min_width: int = 10
    code_block_max_width: int = 60
    padding: int = 4
    style_variations_count: int = 3
    lookback: str = "row"

    # Rasterization size cap for SVG input (pixels per side)
    max_raster_size: int = 4096

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
