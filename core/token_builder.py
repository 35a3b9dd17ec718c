"""
Token 构建器
把切分片段转换为 Token：计算字符/字节偏移、前导空白，并查询词典候选
"""
from typing import Iterable, List

from .segmenter import WHITESPACE, Segment, is_whitespace
from .tagger import Tagger
from .token import Token


class TokenBuilder:
    """Token 构建器（无副作用）"""

    def __init__(self, tagger: Tagger):
        self.tagger = tagger

    def build(self, text: str, segments: Iterable[Segment]) -> List[Token]:
        """
        构建 Token 序列（以句首哨兵开头）

        Args:
            text: 原始输入
            segments: 按顺序覆盖整个输入的切分片段

        Returns:
            Token 列表，空白片段只影响 has_space_before，不生成 Token
        """
        tokens = [Token.sent_start()]

        current_char = 0
        current_byte = 0

        for segment in segments:
            char_start = current_char
            byte_start = current_byte
            current_char += len(segment.text)
            current_byte += len(segment.text.encode("utf-8"))

            trimmed = segment.text.strip(WHITESPACE)
            if not trimmed:
                continue

            lower = trimmed.lower()
            tokens.append(Token(
                text=trimmed,
                lower=lower,
                tags=self.tagger.lookup(lower),
                char_span=(char_start, current_char),
                byte_span=(byte_start, current_byte),
                has_space_before=char_start > 0 and is_whitespace(text[char_start - 1]),
            ))

        return tokens


def postprocess(tokens: List[Token]) -> List[Token]:
    """消歧之后填充 inflections / lower_inflections / postags"""
    for token in tokens:
        token.postprocess()
    return tokens
