"""
词典查询 API 路由
"""
from fastapi import APIRouter, HTTPException, Query
from typing import Dict

from api.models import LookupResponse, TagInfo
from services.resource_manager import ResourceManager

router = APIRouter(prefix="/api/v1/dictionary", tags=["dictionary"])

# 全局资源管理器实例
resource_manager: ResourceManager = None


def set_resource_manager(rm: ResourceManager):
    """设置资源管理器实例"""
    global resource_manager
    resource_manager = rm


@router.get("/stats")
def get_dictionary_stats() -> Dict:
    """获取词典统计信息"""
    if resource_manager is None:
        raise HTTPException(status_code=500, detail="Resource manager not initialized")

    return resource_manager.get_stats()


@router.get("/lookup", response_model=LookupResponse)
def lookup_word(word: str = Query(..., min_length=1)) -> LookupResponse:
    """查询词形的词典候选（大小写不敏感）"""
    if resource_manager is None:
        raise HTTPException(status_code=500, detail="Resource manager not initialized")

    lower = word.lower()
    tags = resource_manager.get().tagger.lookup(lower)

    return LookupResponse(
        word=lower,
        tags=[TagInfo(inflection=inflection, postag=postag) for inflection, postag in tags],
        count=len(tags)
    )
