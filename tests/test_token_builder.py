"""
Token 构建与后处理测试
"""
from core.segmenter import segmenter
from core.tagger import Tagger
from core.token import Token, SENT_START, UNKNOWN
from core.token_builder import TokenBuilder, postprocess


class TestTokenBuilder:
    """Token 构建器测试"""

    def setup_method(self):
        self.builder = TokenBuilder(Tagger({"run": [("run", "VB"), ("run", "NN")]}))

    def build(self, text):
        return self.builder.build(text, segmenter.segment(text))

    def test_sentinel_first(self):
        """测试句首哨兵"""
        tokens = self.build("run")
        assert tokens[0].is_sent_start
        assert tokens[0].postags == [SENT_START]
        assert tokens[0].char_span == (0, 0)
        assert tokens[0].byte_span == (0, 0)

    def test_empty_input(self):
        """测试空输入只有哨兵"""
        tokens = self.build("")
        assert len(tokens) == 1
        assert tokens[0].is_sent_start

    def test_whitespace_dropped(self):
        """测试空白不生成 Token"""
        tokens = self.build("  \t ")
        assert len(tokens) == 1

    def test_ascii_spans(self):
        """测试 ASCII 偏移"""
        tokens = self.build("Hello, world!")[1:]
        assert [t.text for t in tokens] == ["Hello", ",", "world", "!"]
        assert [t.char_span for t in tokens] == [(0, 5), (5, 6), (7, 12), (12, 13)]
        assert [t.byte_span for t in tokens] == [(0, 5), (5, 6), (7, 12), (12, 13)]
        assert [t.has_space_before for t in tokens] == [False, False, True, False]

    def test_multibyte_spans(self):
        """测试多字节字符的字符/字节偏移"""
        tokens = self.build("café über")[1:]
        assert [t.char_span for t in tokens] == [(0, 4), (5, 9)]
        assert [t.byte_span for t in tokens] == [(0, 5), (6, 11)]

    def test_astral_char(self):
        """测试 4 字节字符按一个字符计数"""
        tokens = self.build("a 😀 b")[1:]
        assert [t.char_span for t in tokens] == [(0, 1), (2, 3), (4, 5)]
        assert [t.byte_span for t in tokens] == [(0, 1), (2, 6), (7, 8)]

    def test_leading_whitespace(self):
        """测试前导空白"""
        token = self.build("  run")[1]
        assert token.char_span == (2, 5)
        assert token.has_space_before

    def test_information_separator_kept_in_token(self):
        """测试 U+001C-U+001F 不被裁剪，也不算前导空白"""
        tokens = self.build("x\x1f run\x1fy")[1:]
        assert [t.text for t in tokens] == ["x\x1f", "run\x1fy"]
        assert [t.char_span for t in tokens] == [(0, 2), (3, 8)]
        assert [t.has_space_before for t in tokens] == [False, True]

    def test_lookup_uses_lowercase(self):
        """测试用小写形式查词典"""
        token = self.build("RUN")[1]
        assert token.lower == "run"
        assert token.tags == [("run", "VB"), ("run", "NN")]

    def test_lower_matches_text(self):
        """测试 lower 等于 text 的小写"""
        for token in self.build("İstanbul ÀÉÎ Straße"):
            assert token.lower == token.text.lower()

    def test_unknown_word(self):
        """测试未知词没有候选"""
        assert self.build("xyzzyqqq")[1].tags == []


class TestPostprocess:
    """后处理测试"""

    def test_known_word(self):
        """测试已知词的派生字段"""
        token = Token(text="Run", lower="run", tags=[("run", "VB"), ("run", "NN")])
        postprocess([token])
        assert token.inflections == ["run", "run", "Run"]
        assert token.lower_inflections == ["run", "run", "run"]
        assert token.postags == ["VB", "NN"]

    def test_unknown_word(self):
        """测试未知词回退到 UNKNOWN"""
        token = Token(text="Xyzzy", lower="xyzzy")
        postprocess([token])
        assert token.postags == [UNKNOWN]
        assert token.inflections == ["Xyzzy"]
        assert token.lower_inflections == ["xyzzy"]

    def test_sentinel_keeps_tag(self):
        """测试哨兵保持 SENT_START"""
        token = Token.sent_start()
        postprocess([token])
        assert token.postags == [SENT_START]
        assert token.inflections == [""]
