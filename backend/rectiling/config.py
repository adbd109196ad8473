"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    rectiling_env: str = "development"
    rectiling_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Tiling defaults for requests that leave a parameter out
    default_preset: str = "classic"
    default_cx: int = 32
    default_grid_width: int = 8
    default_max_side: float = 20.0
    default_edge_width: float = 1.0
    default_max_iterations: int = 100
    default_canvas_size: int = 800

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
