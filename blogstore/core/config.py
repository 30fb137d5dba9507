import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# 项目根目录 (config.py 在 blogstore/core/)
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    # 应用基础配置
    APP_NAME: str = Field(default='amanhimself.dev content', description='应用名称')
    APP_VERSION: str = Field(default='1.0.0', description='应用版本')
    ENVIRONMENT: Literal['development', 'staging', 'production'] = Field(default='development', description='运行环境')
    DEBUG: bool = Field(default=False, description='调试模式')

    # 服务器配置
    HOST: str = Field(default='0.0.0.0', description='服务器主机')
    PORT: int = Field(default=8090, description='服务器端口')
    API_V1_PREFIX: str = Field("/api/v1", description="API 路径前缀")

    # 内容目录
    BASE_DIR: Path = Field(default=PROJECT_ROOT, description='项目根目录')
    CONTENT_DIR: Path = Field(default=Path('content'), description='Markdown 文章目录 (相对 BASE_DIR)')

    # 日志配置
    LOG_DIR: Path = Field(default=Path('logs'), description='日志目录 (相对 BASE_DIR)')
    LOG_LEVEL: str = Field(default='INFO', description='日志级别')
    LOG_JSON_FORMAT: bool = Field(default=False, description='是否输出 JSON 日志')
    LOG_TO_FILE: bool = Field(default=False, description='是否写入轮转日志文件')
    LOG_MAX_BYTES: int = Field(default=10 * 1024 * 1024, description='单个日志文件大小上限')
    LOG_BACKUP_COUNT: int = Field(default=5, description='日志文件保留数量')

    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', case_sensitive=True, extra='ignore')

    @property
    def is_development(self) -> bool:
        """是否为开发环境"""
        return self.ENVIRONMENT == 'development'

    @property
    def is_production(self) -> bool:
        """是否为生产环境"""
        return self.ENVIRONMENT == 'production'

    @property
    def content_path(self) -> Path:
        """文章目录的绝对路径"""
        return (self.BASE_DIR / self.CONTENT_DIR).resolve()

    @property
    def log_path(self) -> Path:
        return (self.BASE_DIR / self.LOG_DIR).resolve()


# 根据环境加载不同配置文件
@lru_cache
def get_settings() -> Settings:
    env = os.getenv('ENVIRONMENT', 'development')

    env_file_map = {
        'development': PROJECT_ROOT / '.env.dev',
        'staging': PROJECT_ROOT / '.env.staging',
        'production': PROJECT_ROOT / '.env.prod',
    }
    env_file = env_file_map.get(env, PROJECT_ROOT / '.env')

    return Settings(_env_file=env_file)


# 全局配置实例
settings = get_settings()
