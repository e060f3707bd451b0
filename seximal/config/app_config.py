#!filepath: seximal/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from seximal.utils.errors import UserInputError

from .clock_config import ClockConfig
from .log_config import LogConfig

# 环境变量 → (section, key)
ENV_OVERRIDES = {
    "SEXIMAL_TZ": ("clock", "timezone"),
    "SEXIMAL_LOCAL": ("clock", "local"),
    "SEXIMAL_FORM": ("clock", "form"),
    "SEXIMAL_LOG_LEVEL": ("log", "level"),
    "SEXIMAL_LOG_DIR": ("log", "dir"),
}


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    seximal/config/app_config.py → seximal/config → seximal → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(__file__), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    clock: ClockConfig = Field(default_factory=ClockConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用包内 seximal/config/base.yml
        - SEXIMAL_* 环境变量覆盖文件中的值
        - 不依赖当前工作目录
        """
        # 1) 先加载 .env（在项目根目录下）
        load_dotenv(os.path.join(project_root(), ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            try:
                raw = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise UserInputError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(raw, dict):
            raise UserInputError(f"Config root must be a mapping: {path}")

        # 空 section（"clock:"）按默认处理
        for section in ("log", "clock"):
            if raw.get(section) is None:
                raw[section] = {}

        # 4) 环境变量覆盖
        for var, (section, key) in ENV_OVERRIDES.items():
            value = os.getenv(var)
            if value:
                raw[section][key] = value

        try:
            return cls(**raw)
        except ValidationError as e:
            raise UserInputError(f"Invalid config {path}:\n{e}") from e
