"""Application configuration.

Configuration is loaded from environment variables. For local use, you can provide a
`.env` file and set `MARPKIT_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """marpkit settings.

    All fields are environment-configurable. Prefix is `MARPKIT_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="MARPKIT_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    log_level: str = Field(default="INFO")

    # Menu
    # 幻灯片在线访问地址的前缀，拼接相对路径后得到每个 deck 的链接
    base_url: str = Field(default="https://xiaoxuan668.github.io/TAOYANZUHUI/")
    output_name: str = Field(default="menu.md")
    # 每隔多少行插入一条 --- 分割线
    split_lines: int = Field(default=10, ge=1, le=1000)
    timezone: str = Field(default="Asia/Shanghai")

    # Discovery
    deck_marker: str = Field(default="marp: true")
    deck_suffix: str = Field(default=".md")

    # Fragment directive
    fragment_default: bool = Field(default=True)


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("MARPKIT_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
