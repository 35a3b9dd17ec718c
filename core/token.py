"""
Token 数据模型
"""
from dataclasses import dataclass, field
from typing import List, Tuple

SENT_START = "SENT_START"
UNKNOWN = "UNKNOWN"

# (inflection, postag)
Tag = Tuple[str, str]
Span = Tuple[int, int]


@dataclass
class Token:
    """
    分词结果

    text 是去除首尾空白后的原文片段，char_span 以 Unicode 字符计数，
    byte_span 以 UTF-8 字节计数，两者均为左闭右开区间。

    inflections / lower_inflections / postags 在消歧之后由
    postprocess() 统一填充。
    """
    text: str
    lower: str = ""
    tags: List[Tag] = field(default_factory=list)
    inflections: List[str] = field(default_factory=list)
    lower_inflections: List[str] = field(default_factory=list)
    postags: List[str] = field(default_factory=list)
    char_span: Span = (0, 0)
    byte_span: Span = (0, 0)
    has_space_before: bool = False

    @classmethod
    def sent_start(cls) -> "Token":
        """句首哨兵：零长度，不消耗输入"""
        return cls(text="", postags=[SENT_START])

    @property
    def is_sent_start(self) -> bool:
        return self.text == "" and self.char_span == (0, 0) and SENT_START in self.postags

    def postprocess(self):
        """根据最终的 tags 计算派生字段"""
        self.inflections = [inflection for inflection, _ in self.tags]
        self.inflections.append(self.text)
        self.lower_inflections = [x.lower() for x in self.inflections]

        if self.is_sent_start:
            return

        self.postags = [postag for _, postag in self.tags]
        if not self.postags:
            self.postags = [UNKNOWN]

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "lower": self.lower,
            "tags": [{"inflection": i, "postag": p} for i, p in self.tags],
            "inflections": list(self.inflections),
            "lower_inflections": list(self.lower_inflections),
            "postags": list(self.postags),
            "char_span": list(self.char_span),
            "byte_span": list(self.byte_span),
            "has_space_before": self.has_space_before,
        }
