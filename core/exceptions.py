"""
资源加载异常

词典和消歧规则都在启动时一次性构建，任何加载失败都是致命错误，
不会产生部分加载的结果。
"""
from pathlib import Path
from typing import Optional, Union


class ResourceLoadError(Exception):
    """资源加载失败（启动期致命错误）"""

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        line_number: Optional[int] = None,
    ):
        self.path = Path(path) if path is not None else None
        self.line_number = line_number

        location = ""
        if self.path is not None:
            location = str(self.path)
            if line_number is not None:
                location += f":{line_number}"
            location += ": "

        super().__init__(f"{location}{message}")


class DictionaryLoadError(ResourceLoadError):
    """词典 dump 文件加载失败"""


class DisambiguatorLoadError(ResourceLoadError):
    """消歧规则文件加载失败"""
