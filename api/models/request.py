"""
API 请求模型定义
"""
from typing import List
from pydantic import BaseModel, Field


class TokenizeRequest(BaseModel):
    """单条分词请求"""
    text: str = Field(..., description="待处理的文本", min_length=1, max_length=10000)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"text": "He runs fast. Visit https://example.com/a?b=1 now!"}
            ]
        }
    }


class BatchTokenizeRequest(BaseModel):
    """批量分词请求"""
    texts: List[str] = Field(
        ...,
        description="待处理的文本列表",
        min_length=1
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "texts": [
                        "Hello, world!",
                        "The dog barks."
                    ]
                }
            ]
        }
    }
