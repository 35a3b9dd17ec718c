"""
项目配置管理
"""
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """应用配置"""

    # API配置
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = True

    # 语言配置（决定词典和消歧规则的路径）
    rule_lang: str = "en"

    # 路径配置
    base_path: Path = Path(__file__).parent.parent
    data_path: Path = base_path / "data"
    dumps_path: Optional[Path] = None  # 默认 data/dumps/<rule_lang>
    disambiguation_path: Optional[Path] = None  # 默认 data/disambiguation.<rule_lang>.json

    # 性能配置
    max_batch_size: int = 100

    # 日志配置
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    def get_dumps_path(self) -> Path:
        """当前语言的词典 dump 目录"""
        if self.dumps_path is not None:
            return self.dumps_path
        return self.data_path / "dumps" / self.rule_lang

    def get_disambiguation_path(self) -> Path:
        """当前语言的消歧规则文件"""
        if self.disambiguation_path is not None:
            return self.disambiguation_path
        return self.data_path / f"disambiguation.{self.rule_lang}.json"


# 全局配置实例
settings = Settings()
