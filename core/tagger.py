"""
词形标注模块
从 dump 词典目录加载 词形 -> [(屈折形式, 词性标签)] 映射

dump 文件格式（UTF-8）：
    word<TAB>inflection<TAB>tag[<TAB>...]
以 # 开头的行为注释；其余每一行（包括空行）都必须至少有 3 个字段。
"""
import logging
from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Union

from .exceptions import DictionaryLoadError
from .token import Tag

logger = logging.getLogger(__name__)

MIN_FIELDS = 3


class Tagger:
    """词形标注器（加载后只读）"""

    def __init__(self, tags: Dict[str, List[Tag]], file_count: int = 0):
        self._tags = tags
        self._file_count = file_count

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Tagger":
        """
        加载目录下的所有 dump 文件

        Args:
            path: dump 文件目录

        Returns:
            Tagger 实例

        Raises:
            DictionaryLoadError: 目录/文件无法读取，或某行字段不足 3 个
        """
        directory = Path(path)
        if not directory.is_dir():
            raise DictionaryLoadError("dump directory not found", path=directory)

        tags: Dict[str, List[Tag]] = defaultdict(list)

        try:
            files = sorted(p for p in directory.iterdir() if p.is_file())
        except OSError as e:
            raise DictionaryLoadError(f"cannot list directory: {e}", path=directory) from e

        for file_path in files:
            count = cls._load_file(file_path, tags)
            logger.debug("loaded dump %s: %d entries", file_path.name, count)

        logger.info(
            "dictionary loaded from %s: %d words, %d files",
            directory, len(tags), len(files)
        )
        return cls(dict(tags), file_count=len(files))

    @staticmethod
    def _load_file(file_path: Path, tags: Dict[str, List[Tag]]) -> int:
        """加载单个 dump 文件，返回条目数"""
        count = 0
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                for line_number, line in enumerate(f, start=1):
                    line = line.rstrip("\r\n")
                    if line.startswith("#"):
                        continue

                    parts = line.split("\t")
                    if len(parts) < MIN_FIELDS:
                        raise DictionaryLoadError(
                            f"expected at least {MIN_FIELDS} tab-separated fields, got {len(parts)}",
                            path=file_path,
                            line_number=line_number,
                        )

                    word, inflection, tag = parts[0].lower(), parts[1], parts[2]
                    tags[word].append((inflection, tag))
                    count += 1
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryLoadError(f"cannot read dump file: {e}", path=file_path) from e

        return count

    def lookup(self, word: str) -> List[Tag]:
        """查询小写词形的所有 (屈折形式, 词性) 对，未知词返回空列表"""
        return list(self._tags.get(word, ()))

    def __contains__(self, word: str) -> bool:
        return word in self._tags

    def __len__(self) -> int:
        return len(self._tags)

    def get_stats(self) -> Dict:
        """获取词典统计信息"""
        entries = 0
        postags = set()
        for readings in self._tags.values():
            entries += len(readings)
            postags.update(tag for _, tag in readings)

        return {
            "words": len(self._tags),
            "entries": entries,
            "postags": len(postags),
            "files": self._file_count,
        }
