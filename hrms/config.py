# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Every field can be overridden by an environment variable of the same name
    (case-insensitive) or through a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "HRMS"
    database_url: str = "sqlite:///./hrms.db"
    secret_key: str = "change-me-in-production"
    session_expiry_days: int = 7
    cors_origins: list[str] = ["http://localhost:5173"]
    log_level: str = "INFO"

    # Seed core permissions and default roles when the app starts
    seed_on_startup: bool = True

    employee_id_prefix: str = "EMP"
    employee_code_prefix: str = "TC"

    default_page_size: int = 10
    max_page_size: int = 100


settings = Settings()
