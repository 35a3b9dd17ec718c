from .tokenize import router as tokenize_router, set_pipeline
from .dictionary import router as dictionary_router, set_resource_manager

__all__ = [
    "tokenize_router",
    "dictionary_router",
    "set_pipeline",
    "set_resource_manager"
]
