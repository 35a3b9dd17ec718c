"""
词典标注测试
"""
import pytest

from core.exceptions import DictionaryLoadError
from core.tagger import Tagger


def write_dump(directory, name, lines):
    path = directory / name
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


class TestTaggerLoad:
    """词典加载测试"""

    def test_lookup(self, tmp_path):
        """测试基本查询"""
        write_dump(tmp_path, "a.txt", ["run\trun\tVB"])
        tagger = Tagger.load(tmp_path)
        assert tagger.lookup("run") == [("run", "VB")]

    def test_comment_skipped(self, tmp_path):
        """测试注释行不产生词条"""
        write_dump(tmp_path, "a.txt", ["#run\trun\tVB", "# comment", "dog\tdog\tNN"])
        tagger = Tagger.load(tmp_path)
        assert tagger.lookup("#run") == []
        assert "#run" not in tagger
        assert len(tagger) == 1

    @pytest.mark.parametrize("line", ["", " \t ", "   "])
    def test_blank_line_is_fatal(self, tmp_path, line):
        """测试空行/纯空白行字段不足，加载失败"""
        write_dump(tmp_path, "a.txt", ["dog\tdog\tNN", line, "run\trun\tVB"])
        with pytest.raises(DictionaryLoadError) as exc_info:
            Tagger.load(tmp_path)
        assert exc_info.value.line_number == 2

    def test_multiple_entries_keep_order(self, tmp_path):
        """测试同一词的多个条目保持文件顺序"""
        write_dump(tmp_path, "a.txt", ["run\trun\tVB", "run\trun\tNN", "run\trun\tVBP"])
        tagger = Tagger.load(tmp_path)
        assert tagger.lookup("run") == [("run", "VB"), ("run", "NN"), ("run", "VBP")]

    def test_extra_fields_ignored(self, tmp_path):
        """测试多余字段被忽略"""
        write_dump(tmp_path, "a.txt", ["runs\trun\tVBZ\textra\tmore"])
        assert Tagger.load(tmp_path).lookup("runs") == [("run", "VBZ")]

    def test_word_lowercased(self, tmp_path):
        """测试词形在加载时转小写，屈折形式保持原样"""
        write_dump(tmp_path, "a.txt", ["Paris\tParis\tNNP"])
        tagger = Tagger.load(tmp_path)
        assert tagger.lookup("paris") == [("Paris", "NNP")]
        assert tagger.lookup("Paris") == []

    def test_all_files_consumed(self, tmp_path):
        """测试读取目录下所有文件"""
        write_dump(tmp_path, "a.txt", ["dog\tdog\tNN"])
        write_dump(tmp_path, "b.dump", ["cat\tcat\tNN"])
        tagger = Tagger.load(tmp_path)
        assert "dog" in tagger
        assert "cat" in tagger
        assert tagger.get_stats()["files"] == 2

    def test_stats(self, tmp_path):
        """测试统计信息"""
        write_dump(tmp_path, "a.txt", ["run\trun\tVB", "run\trun\tNN", "dog\tdog\tNN"])
        stats = Tagger.load(tmp_path).get_stats()
        assert stats == {"words": 2, "entries": 3, "postags": 2, "files": 1}


class TestTaggerErrors:
    """词典加载失败测试"""

    def test_too_few_fields(self, tmp_path):
        """测试字段不足是致命错误"""
        write_dump(tmp_path, "a.txt", ["dog\tdog\tNN", "broken\tline"])
        with pytest.raises(DictionaryLoadError) as exc_info:
            Tagger.load(tmp_path)
        assert exc_info.value.line_number == 2
        assert exc_info.value.path.name == "a.txt"

    def test_missing_directory(self, tmp_path):
        """测试目录不存在"""
        with pytest.raises(DictionaryLoadError):
            Tagger.load(tmp_path / "missing")

    def test_invalid_utf8(self, tmp_path):
        """测试非 UTF-8 文件"""
        (tmp_path / "bad.txt").write_bytes(b"\xff\xfe\tx\ty\n")
        with pytest.raises(DictionaryLoadError):
            Tagger.load(tmp_path)


class TestTaggerLookup:
    """查询测试"""

    def setup_method(self):
        self.tagger = Tagger({"run": [("run", "VB")]})

    def test_unknown_word(self):
        """测试未知词返回空列表"""
        assert self.tagger.lookup("xyzzyqqq") == []

    def test_lookup_returns_copy(self):
        """测试返回副本，不影响词典"""
        result = self.tagger.lookup("run")
        result.append(("x", "Y"))
        assert self.tagger.lookup("run") == [("run", "VB")]
