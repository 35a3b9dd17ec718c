"""
分词与标注处理流水线
整合所有模块，实现完整的处理流程

处理流程：
输入 → 句子边界 → 切分 → 构建 Token（含句首哨兵）→ 消歧 → 后处理 → 输出
"""
from dataclasses import dataclass, field
from typing import List, Tuple

from .resources import LanguageResources
from .segmenter import Segmenter
from .sentence_splitter import split_sentences
from .token import Token
from .token_builder import TokenBuilder, postprocess


@dataclass
class TokenizeResult:
    """处理结果"""
    text: str
    tokens: List[Token]
    sentences: List[Tuple[int, int]] = field(default_factory=list)  # 字节区间

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "tokens": [token.to_dict() for token in self.tokens],
            "sentences": [list(s) for s in self.sentences],
        }


class TokenizePipeline:
    """分词与标注处理流水线（线程安全：共享状态只读）"""

    def __init__(self, resources: LanguageResources):
        self.resources = resources

        # 初始化各组件
        self.segmenter = Segmenter()
        self.token_builder = TokenBuilder(resources.tagger)
        self.disambiguator = resources.disambiguator

    def tokenize(self, text: str) -> List[Token]:
        """
        分词并标注

        Args:
            text: 输入文本

        Returns:
            以句首哨兵开头的 Token 列表
        """
        return self.analyze(text).tokens

    def analyze(self, text: str) -> TokenizeResult:
        """分词并标注，同时返回句子边界"""
        # Step 1: 句子边界（仅作为元数据返回）
        sentences = split_sentences(text)

        # Step 2: 切分
        segments = self.segmenter.segment(text)

        # Step 3: 构建 Token
        tokens = self.token_builder.build(text, segments)

        # Step 4: 消歧
        tokens = self.disambiguator.apply(tokens)

        # Step 5: 后处理
        tokens = postprocess(tokens)

        return TokenizeResult(text=text, tokens=tokens, sentences=sentences)


def tokenize(text: str, resources: LanguageResources) -> List[Token]:
    """便捷函数：分词并标注"""
    return TokenizePipeline(resources).tokenize(text)
