"""
语言资源包
"""
from dataclasses import dataclass

from .disambiguator import Disambiguator
from .tagger import Tagger


@dataclass(frozen=True)
class LanguageResources:
    """某一语言的只读资源包（进程内共享，构建后不再修改）"""
    language: str
    tagger: Tagger
    disambiguator: Disambiguator
