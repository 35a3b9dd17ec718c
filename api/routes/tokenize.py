"""
分词相关 API 路由
"""
from fastapi import APIRouter, HTTPException

from api.models import (
    TokenizeRequest,
    BatchTokenizeRequest,
    TokenizeResponse,
    BatchTokenizeResponse
)
from config import settings
from core.pipeline import TokenizePipeline

router = APIRouter(prefix="/api/v1", tags=["tokenize"])

# 全局 pipeline 实例（在 main.py 中初始化）
pipeline: TokenizePipeline = None


def set_pipeline(p: TokenizePipeline):
    """设置 pipeline 实例"""
    global pipeline
    pipeline = p


@router.post("/tokenize", response_model=TokenizeResponse)
def tokenize_single(request: TokenizeRequest) -> TokenizeResponse:
    """
    处理单条文本

    - URL 保持完整，按空白和标点切分
    - 返回字符/字节偏移、词典候选和消歧后的词性
    - 附带句子字节区间
    """
    if pipeline is None:
        raise HTTPException(status_code=500, detail="Pipeline not initialized")

    result = pipeline.analyze(request.text)
    return TokenizeResponse(**result.to_dict())


@router.post("/tokenize/batch", response_model=BatchTokenizeResponse)
def tokenize_batch(request: BatchTokenizeRequest) -> BatchTokenizeResponse:
    """批量处理文本"""
    if pipeline is None:
        raise HTTPException(status_code=500, detail="Pipeline not initialized")

    if len(request.texts) > settings.max_batch_size:
        raise HTTPException(
            status_code=400,
            detail=f"Batch size exceeds limit of {settings.max_batch_size}"
        )

    results = [
        TokenizeResponse(**pipeline.analyze(text).to_dict())
        for text in request.texts
    ]

    return BatchTokenizeResponse(results=results, total=len(request.texts))
