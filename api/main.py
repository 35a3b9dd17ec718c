"""
语法检查前端分词与词形标注服务 - API 入口
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from api.routes import tokenize_router, dictionary_router, set_pipeline, set_resource_manager
from api.models import HealthResponse
from core.pipeline import TokenizePipeline
from services.resource_manager import ResourceManager

VERSION = "1.0.0"

# 全局实例
pipeline: TokenizePipeline = None
resource_manager: ResourceManager = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    global pipeline, resource_manager

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # 启动时初始化
    print("🚀 正在初始化服务...")

    # 加载词典和消歧规则（失败则启动失败）
    resource_manager = ResourceManager.from_settings(settings)
    resources = resource_manager.get()
    print(f"📚 资源加载完成 [{resources.language}]: {resource_manager.get_stats()}")

    # 初始化处理流水线
    pipeline = TokenizePipeline(resources)
    print("⚙️ 处理流水线初始化完成")

    # 设置路由依赖
    set_pipeline(pipeline)
    set_resource_manager(resource_manager)

    print("✅ 服务启动完成!")

    yield

    # 关闭时清理
    print("👋 服务关闭中...")


# 创建 FastAPI 应用
app = FastAPI(
    title="语法检查前端分词服务",
    description="""
    ## 功能
    - 分词：按空白和标点切分，URL 保持完整，保留字符/字节偏移
    - 词形标注：基于 dump 词典给出 (屈折形式, 词性) 候选
    - 上下文消歧：按规则收窄候选
    - 句子边界：以字节区间返回

    ## 语言
    通过 RULE_LANG 选择词典和规则
    """,
    version=VERSION,
    lifespan=lifespan
)

# CORS 配置
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 注册路由
app.include_router(tokenize_router)
app.include_router(dictionary_router)


@app.get("/", tags=["health"])
async def root():
    """根路径"""
    return {"message": "语法检查前端分词服务", "docs": "/docs"}


@app.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check() -> HealthResponse:
    """健康检查"""
    return HealthResponse(
        status="healthy",
        version=VERSION,
        language=settings.rule_lang,
        dictionary_loaded=resource_manager is not None and resource_manager.is_loaded()
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
