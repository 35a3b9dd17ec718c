"""
句子边界切分
返回覆盖全文的 (起始字节, 结束字节) 区间，供下游按需使用
"""
import re
from typing import List, Tuple

from .segmenter import WHITESPACE

LINE_BREAKS = "\r\n\x85\u2028\u2029"

_WS = re.escape(WHITESPACE)
_BREAKS = re.escape(LINE_BREAKS)

# 句末标点 + 可选的右引号/右括号 + 至少一个空白；或者连续换行
SENTENCE_END_PATTERN = re.compile(
    rf"[.!?…]+[\"'”’»)\]]*[{_WS}]+"
    rf"|[{_BREAKS}]+[{_WS}]*"
)


def split_sentences(text: str) -> List[Tuple[int, int]]:
    """
    切分句子

    句末标点后紧跟小写字母时（如 "etc. and"）不切分，换行总是切分。

    Args:
        text: 输入文本

    Returns:
        字节区间列表，区间首尾相接并覆盖整个 UTF-8 编码后的输入
    """
    if not text:
        return []

    boundaries = []
    char_start = 0
    byte_start = 0

    for match in SENTENCE_END_PATTERN.finditer(text):
        char_end = match.end()
        if text[char_end:char_end + 1].islower() and not any(c in LINE_BREAKS for c in match.group(0)):
            continue

        byte_end = byte_start + len(text[char_start:char_end].encode("utf-8"))
        boundaries.append((byte_start, byte_end))
        char_start, byte_start = char_end, byte_end

    if char_start < len(text):
        byte_end = byte_start + len(text[char_start:].encode("utf-8"))
        boundaries.append((byte_start, byte_end))

    return boundaries
