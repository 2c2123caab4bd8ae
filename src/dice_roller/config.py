"""Settings loader for dice_roller."""

from pathlib import Path
from typing import Any

import tomllib
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _toml_settings_source() -> dict[str, Any]:
    """Load settings from config.toml with keys mapped to Settings fields.

    This source has LOWER priority than env/.env so those can override TOML.
    """
    cfg_path = Path("config.toml")
    if not cfg_path.exists():
        return {}
    with cfg_path.open("rb") as f:
        t = tomllib.load(f)
    log_cfg = t.get("logging", {}) or {}
    out: dict[str, Any] = {
        "env": t.get("app", {}).get("env", "dev"),
        "logging_level": log_cfg.get("level", "INFO"),
        "logging_file_path": log_cfg.get("file_path", "logs/dice_roller.jsonl"),
        "logging_max_bytes": log_cfg.get("max_bytes", 5_000_000),
        "logging_backup_count": log_cfg.get("backup_count", 5),
    }

    # Per-handler levels: strings INFO|DEBUG|WARNING|ERROR|CRITICAL|NONE
    # Booleans map True -> overall level, False -> NONE
    overall = str(out["logging_level"]).upper()

    def _norm_level(v, default):
        if isinstance(v, str):
            return v.upper()
        if isinstance(v, bool):
            return default if v else "NONE"
        return default

    if "console" in log_cfg:
        out["logging_console"] = _norm_level(log_cfg["console"], overall)
    if "to_file" in log_cfg:
        out["logging_file"] = _norm_level(log_cfg["to_file"], overall)

    dice_cfg = t.get("dice", {}) or {}
    if dice_cfg.get("default_sides") is not None:
        out["default_sides"] = dice_cfg["default_sides"]

    return out


class Settings(BaseSettings):
    env: str = Field(default="dev")

    # --- Dice ---
    default_sides: int = Field(
        default=20, ge=1, description="Faces used by single-die CLI commands when --sides is omitted."
    )

    # --- Logging ---
    logging_level: str = "INFO"
    logging_console: str = "WARNING"
    logging_file: str = "NONE"
    logging_file_path: str = "logs/dice_roller.jsonl"
    logging_max_bytes: int = 5_000_000
    logging_backup_count: int = 5

    model_config = SettingsConfigDict(
        env_prefix="DICE_ROLLER_",
        case_sensitive=False,
        env_file=".env",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Precedence (highest to lowest):
        # 1) init_settings (explicit overrides in code/tests)
        # 2) dotenv (.env in cwd)
        # 3) env_settings (OS env)
        # 4) TOML (config.toml in cwd)
        # 5) file_secret_settings
        return (
            init_settings,
            dotenv_settings,
            env_settings,
            _toml_settings_source,
            file_secret_settings,
        )


def load_settings() -> Settings:
    return Settings()
