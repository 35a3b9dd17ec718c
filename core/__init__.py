"""
核心处理模块

- Segmenter: 文本切分器（URL 保持完整，按空白/分隔符切分）
- Tagger: 基于 dump 词典的词形标注器
- TokenBuilder: 切分片段 → Token（字符/字节偏移、前导空白、词典候选）
- Disambiguator: 数据驱动的上下文消歧规则
- TokenizePipeline: 处理流水线
"""
from .exceptions import ResourceLoadError, DictionaryLoadError, DisambiguatorLoadError
from .token import Token, SENT_START, UNKNOWN
from .segmenter import Segmenter, SegmentType, Segment, split_text
from .sentence_splitter import split_sentences
from .tagger import Tagger
from .token_builder import TokenBuilder, postprocess
from .disambiguator import Disambiguator, DisambiguationRule, TokenMatcher
from .resources import LanguageResources
from .pipeline import TokenizePipeline, TokenizeResult, tokenize

__all__ = [
    # 异常
    "ResourceLoadError",
    "DictionaryLoadError",
    "DisambiguatorLoadError",
    # 数据模型
    "Token",
    "SENT_START",
    "UNKNOWN",
    # 组件
    "Segmenter",
    "SegmentType",
    "Segment",
    "Tagger",
    "TokenBuilder",
    "Disambiguator",
    "DisambiguationRule",
    "TokenMatcher",
    "TokenizePipeline",
    "TokenizeResult",
    "LanguageResources",
    # 便捷函数
    "split_text",
    "split_sentences",
    "postprocess",
    "tokenize",
]
