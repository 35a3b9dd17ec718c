"""
API 响应模型定义
"""
from typing import List, Tuple
from pydantic import BaseModel, Field


class TagInfo(BaseModel):
    """词典候选"""
    inflection: str = Field(..., description="屈折形式/词元")
    postag: str = Field(..., description="词性标签")


class TokenInfo(BaseModel):
    """分词结果中的单个token"""
    text: str = Field(..., description="原文片段（去除首尾空白）")
    lower: str = Field(..., description="小写形式")
    tags: List[TagInfo] = Field(..., description="消歧后的候选")
    inflections: List[str] = Field(..., description="屈折形式列表（末尾为原文）")
    lower_inflections: List[str] = Field(..., description="小写屈折形式列表")
    postags: List[str] = Field(..., description="词性列表")
    char_span: Tuple[int, int] = Field(..., description="字符区间 [start, end)")
    byte_span: Tuple[int, int] = Field(..., description="UTF-8 字节区间 [start, end)")
    has_space_before: bool = Field(..., description="前面是否为空白")


class TokenizeResponse(BaseModel):
    """分词响应"""
    text: str = Field(..., description="原始文本")
    tokens: List[TokenInfo] = Field(..., description="Token 列表（首个为句首哨兵）")
    sentences: List[Tuple[int, int]] = Field(..., description="句子字节区间")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "text": "Run!",
                    "tokens": [
                        {"text": "", "lower": "", "tags": [], "inflections": [""],
                         "lower_inflections": [""], "postags": ["SENT_START"],
                         "char_span": [0, 0], "byte_span": [0, 0], "has_space_before": False},
                        {"text": "Run", "lower": "run",
                         "tags": [{"inflection": "run", "postag": "VB"}],
                         "inflections": ["run", "Run"], "lower_inflections": ["run", "run"],
                         "postags": ["VB"], "char_span": [0, 3], "byte_span": [0, 3],
                         "has_space_before": False},
                        {"text": "!", "lower": "!", "tags": [], "inflections": ["!"],
                         "lower_inflections": ["!"], "postags": ["UNKNOWN"],
                         "char_span": [3, 4], "byte_span": [3, 4], "has_space_before": False}
                    ],
                    "sentences": [[0, 4]]
                }
            ]
        }
    }


class BatchTokenizeResponse(BaseModel):
    """批量分词响应"""
    results: List[TokenizeResponse] = Field(..., description="分词结果列表")
    total: int = Field(..., description="处理总数")


class LookupResponse(BaseModel):
    """词典查询响应"""
    word: str = Field(..., description="查询的小写词形")
    tags: List[TagInfo] = Field(..., description="词典候选")
    count: int = Field(..., description="候选数量")


class HealthResponse(BaseModel):
    """健康检查响应"""
    status: str = Field(..., description="服务状态")
    version: str = Field(..., description="版本号")
    language: str = Field(..., description="当前语言")
    dictionary_loaded: bool = Field(..., description="词典是否加载")
