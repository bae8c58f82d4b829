"""
config.py — Application configuration through environment variables.
All variables use the EXPR_CALC_ prefix.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # API request limits
    max_expression_length: int = 10_000

    # App
    app_title: str = "ExprCalc"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="EXPR_CALC_", env_file=".env", extra="ignore")
