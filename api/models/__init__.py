from .request import TokenizeRequest, BatchTokenizeRequest
from .response import (
    TokenizeResponse,
    BatchTokenizeResponse,
    TokenInfo,
    TagInfo,
    LookupResponse,
    HealthResponse
)

__all__ = [
    "TokenizeRequest",
    "BatchTokenizeRequest",
    "TokenizeResponse",
    "BatchTokenizeResponse",
    "TokenInfo",
    "TagInfo",
    "LookupResponse",
    "HealthResponse"
]
