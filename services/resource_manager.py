"""
语言资源管理器
负责一次性加载词典和消歧规则，并以只读资源包的形式提供给流水线
"""
import logging
import threading
from pathlib import Path
from typing import Dict, Optional, Union

from core.disambiguator import Disambiguator
from core.resources import LanguageResources
from core.tagger import Tagger

logger = logging.getLogger(__name__)


class ResourceManager:
    """
    资源管理器

    首次调用 get() 时加载资源，加锁保证并发首次访问只加载一次；
    加载失败直接抛出异常，不会保留部分结果。
    """

    def __init__(
        self,
        dumps_path: Union[str, Path],
        disambiguation_path: Optional[Union[str, Path]] = None,
        language: str = "en",
        require_rules: bool = True,
    ):
        """
        Args:
            dumps_path: 词典 dump 目录
            disambiguation_path: 消歧规则文件，None 表示不使用规则
            language: 语言代码
            require_rules: 规则文件不存在时是否报错（False 时退化为空规则）
        """
        self.dumps_path = Path(dumps_path)
        self.disambiguation_path = Path(disambiguation_path) if disambiguation_path else None
        self.language = language
        self.require_rules = require_rules
        self._resources: Optional[LanguageResources] = None
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings) -> "ResourceManager":
        """根据配置创建（显式配置的规则路径必须存在）"""
        return cls(
            dumps_path=settings.get_dumps_path(),
            disambiguation_path=settings.get_disambiguation_path(),
            language=settings.rule_lang,
            require_rules=settings.disambiguation_path is not None,
        )

    def get(self) -> LanguageResources:
        """获取资源包（首次访问时加载）"""
        resources = self._resources
        if resources is not None:
            return resources

        with self._lock:
            if self._resources is None:
                self._resources = self._load()
            return self._resources

    def _load(self) -> LanguageResources:
        tagger = Tagger.load(self.dumps_path)

        if self.disambiguation_path is None:
            disambiguator = Disambiguator.empty()
        elif not self.disambiguation_path.exists() and not self.require_rules:
            logger.warning("no disambiguation rules at %s, using none", self.disambiguation_path)
            disambiguator = Disambiguator.empty()
        else:
            disambiguator = Disambiguator.load(self.disambiguation_path)

        return LanguageResources(
            language=self.language,
            tagger=tagger,
            disambiguator=disambiguator,
        )

    def is_loaded(self) -> bool:
        """检查资源是否已加载"""
        return self._resources is not None

    def get_stats(self) -> Dict:
        """获取资源统计信息"""
        resources = self.get()
        stats = resources.tagger.get_stats()
        stats["rules"] = len(resources.disambiguator)
        stats["language"] = resources.language
        return stats
