"""
API 测试
"""
import json

import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.routes import set_pipeline, set_resource_manager
from config import settings


@pytest.fixture
def client(tmp_path, monkeypatch):
    """使用临时资源启动服务"""
    dumps = tmp_path / "dumps"
    dumps.mkdir()
    (dumps / "words.txt").write_text(
        "run\trun\tVB\nrun\trun\tNN\nhello\thello\tUH\n", encoding="utf-8"
    )
    rules = tmp_path / "rules.json"
    rules.write_text(json.dumps({"rules": [
        {"id": "start_verb", "pattern": [{"postag": "SENT_START"}, {"text": "run"}],
         "marker": 1, "action": "select", "postag": "VB"},
    ]}), encoding="utf-8")

    monkeypatch.setattr(settings, "dumps_path", dumps)
    monkeypatch.setattr(settings, "disambiguation_path", rules)
    monkeypatch.setattr(settings, "rule_lang", "en")

    with TestClient(app) as test_client:
        yield test_client


class TestHealth:
    """健康检查测试"""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["docs"] == "/docs"

    def test_health(self, client):
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["language"] == "en"
        assert data["dictionary_loaded"] is True


class TestTokenizeApi:
    """分词接口测试"""

    def test_tokenize(self, client):
        """测试单条分词"""
        response = client.post("/api/v1/tokenize", json={"text": "Hello, world!"})
        assert response.status_code == 200
        data = response.json()
        assert [t["text"] for t in data["tokens"]] == ["", "Hello", ",", "world", "!"]
        assert data["tokens"][0]["postags"] == ["SENT_START"]
        assert data["tokens"][1]["postags"] == ["UH"]
        assert data["tokens"][3]["postags"] == ["UNKNOWN"]
        assert data["tokens"][3]["char_span"] == [7, 12]
        assert data["tokens"][3]["has_space_before"] is True
        assert data["sentences"] == [[0, 13]]

    def test_tokenize_disambiguated(self, client):
        """测试消歧结果"""
        data = client.post("/api/v1/tokenize", json={"text": "Run run"}).json()
        assert data["tokens"][1]["tags"] == [{"inflection": "run", "postag": "VB"}]
        assert data["tokens"][1]["inflections"] == ["run", "Run"]
        assert data["tokens"][2]["postags"] == ["VB", "NN"]

    def test_tokenize_empty_text(self, client):
        """测试空文本校验失败"""
        response = client.post("/api/v1/tokenize", json={"text": ""})
        assert response.status_code == 422

    def test_batch(self, client):
        """测试批量分词"""
        response = client.post("/api/v1/tokenize/batch", json={"texts": ["run", "hello there"]})
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [t["text"] for t in data["results"][1]["tokens"]] == ["", "hello", "there"]

    def test_batch_limit(self, client, monkeypatch):
        """测试批量上限"""
        monkeypatch.setattr(settings, "max_batch_size", 1)
        response = client.post("/api/v1/tokenize/batch", json={"texts": ["a", "b"]})
        assert response.status_code == 400


class TestDictionaryApi:
    """词典接口测试"""

    def test_lookup(self, client):
        """测试查询（大小写不敏感）"""
        data = client.get("/api/v1/dictionary/lookup", params={"word": "Run"}).json()
        assert data["word"] == "run"
        assert data["count"] == 2
        assert data["tags"][0] == {"inflection": "run", "postag": "VB"}

    def test_lookup_unknown(self, client):
        """测试查询未知词"""
        data = client.get("/api/v1/dictionary/lookup", params={"word": "xyzzy"}).json()
        assert data["count"] == 0
        assert data["tags"] == []

    def test_stats(self, client):
        """测试统计信息"""
        data = client.get("/api/v1/dictionary/stats").json()
        assert data["words"] == 2
        assert data["entries"] == 3
        assert data["rules"] == 1


class TestNotInitialized:
    """未初始化测试"""

    def test_returns_500(self):
        set_pipeline(None)
        set_resource_manager(None)
        client = TestClient(app)
        assert client.post("/api/v1/tokenize", json={"text": "run"}).status_code == 500
        assert client.get("/api/v1/dictionary/stats").status_code == 500
