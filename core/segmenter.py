"""
文本切分器
将文本切分为有序、互不重叠的原始片段，片段拼接后与原文完全一致

规则：
1. 先从左到右匹配 URL，匹配到的区间保持完整，不再按分隔符切分
2. URL 之间的文本在每个空白字符和分隔符处切分，
   每个空白/分隔符单独成段，其余连续字符合并为一段
"""
import re
from enum import Enum
from typing import List, NamedTuple


class SegmentType(Enum):
    """片段类型"""
    URL = "url"
    WORD = "word"
    DELIMITER = "delimiter"
    SPACE = "space"


class Segment(NamedTuple):
    """切分结果（start/end 为字符偏移）"""
    text: str
    kind: SegmentType
    start: int
    end: int


# 宽松的 URL 模式：可选协议、可选 www.、主机名、2-6 位顶级域、可选路径和查询串
URL_PATTERN = re.compile(
    r"(https?://.)?(www\.)?[-a-zA-Z0-9@:%._+~#=]{2,256}\.[a-z]{2,6}\b"
    r"([-a-zA-Z0-9@:%_+.~#?&/=]*)"
)

# 引号、括号、句读、比较符、弯引号/书名引号、加号、井号、星号、省略号
DELIMITERS = frozenset("'’`´‘[],.:!?/\\()<=>„“”\"«»+#…*")

# Unicode White_Space；str.isspace() 还会把 U+001C-U+001F 当作空白，这里不算
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def is_whitespace(char: str) -> bool:
    return char in WHITESPACE


class Segmenter:
    """
    文本切分器

    示例：
    输入: "visit https://example.com/a?b=1 now"
    输出: ["visit", " ", "https://example.com/a?b=1", " ", "now"]
    """

    def __init__(self, delimiters=DELIMITERS, url_pattern=URL_PATTERN):
        self.delimiters = frozenset(delimiters)
        self.url_pattern = url_pattern

    def segment(self, text: str) -> List[Segment]:
        """
        对文本进行切分

        Args:
            text: 输入文本

        Returns:
            片段列表，所有片段的 text 拼接后等于原文
        """
        if not text:
            return []

        segments = []
        prev = 0

        for match in self.url_pattern.finditer(text):
            segments.extend(self._split(text, prev, match.start()))
            segments.append(Segment(
                text=match.group(0),
                kind=SegmentType.URL,
                start=match.start(),
                end=match.end()
            ))
            prev = match.end()

        segments.extend(self._split(text, prev, len(text)))

        return segments

    def _split(self, text: str, start: int, end: int) -> List[Segment]:
        """在空白和分隔符处切分 text[start:end]"""
        segments = []
        run_start = start

        for i in range(start, end):
            char = text[i]

            if is_whitespace(char):
                kind = SegmentType.SPACE
            elif char in self.delimiters:
                kind = SegmentType.DELIMITER
            else:
                continue

            # 先保存之前累积的普通字符
            if run_start < i:
                segments.append(Segment(text[run_start:i], SegmentType.WORD, run_start, i))
            segments.append(Segment(char, kind, i, i + 1))
            run_start = i + 1

        if run_start < end:
            segments.append(Segment(text[run_start:end], SegmentType.WORD, run_start, end))

        return segments


# 默认实例
segmenter = Segmenter()


def split_text(text: str) -> List[str]:
    """便捷函数：返回切分后的片段字符串"""
    return [seg.text for seg in segmenter.segment(text)]
