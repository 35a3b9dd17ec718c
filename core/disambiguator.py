"""
上下文消歧模块

数据驱动的规则解释器：每条规则由一个 token 匹配窗口和一个动作组成，
动作作用于窗口内的标记 token（marker），用于收窄词典给出的候选。

支持的动作：
- select: 将候选替换为唯一的 (inflection, postag)
- filter: 只保留匹配 postag 的候选（没有任何匹配时不变）
- remove: 删除匹配 postag 的候选
- add:    追加一个候选（已存在则跳过）
- unify:  窗口内所有 token 只保留共有特征值的候选

规则文件（JSON）：
    {"rules": [{"id": "...", "pattern": [{"postag": "DT"}, {"postag": "NN.*|VB.*"}],
                "marker": 1, "action": "filter", "postag": "NN.*"}]}
"""
import json
import logging
import re
from dataclasses import replace
from functools import lru_cache
from pathlib import Path
from typing import Callable, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from .exceptions import DisambiguatorLoadError
from .token import Tag, Token

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _compile(pattern: str, ignore_case: bool = False) -> re.Pattern:
    return re.compile(pattern, re.IGNORECASE if ignore_case else 0)


def _check_regex(value: Optional[str]) -> Optional[str]:
    if value is not None:
        try:
            _compile(value)
        except re.error as e:
            raise ValueError(f"invalid regex {value!r}: {e}") from e
    return value


def _readings(token: Token) -> List[Tag]:
    """token 的候选；没有词典候选时用 postags（句首哨兵靠这个匹配）"""
    if token.tags:
        return token.tags
    return [(token.lower, postag) for postag in token.postags]


class TokenMatcher(BaseModel):
    """窗口中单个位置的匹配条件（正则均为全匹配）"""
    text: Optional[str] = None
    postag: Optional[str] = None
    inflection: Optional[str] = None
    case_sensitive: bool = False
    negate: bool = False

    model_config = {"extra": "forbid"}

    @field_validator("text", "postag", "inflection")
    @classmethod
    def check_regex(cls, v: Optional[str]) -> Optional[str]:
        return _check_regex(v)

    def matches(self, token: Token) -> bool:
        ignore_case = not self.case_sensitive
        readings = _readings(token)
        matched = True

        if self.text is not None:
            matched = _compile(self.text, ignore_case).fullmatch(token.text) is not None

        if matched and self.postag is not None:
            postag_re = _compile(self.postag)
            matched = any(postag_re.fullmatch(postag) for _, postag in readings)

        if matched and self.inflection is not None:
            inflection_re = _compile(self.inflection, ignore_case)
            matched = any(inflection_re.fullmatch(inflection) for inflection, _ in readings)

        return matched != self.negate


class DisambiguationRule(BaseModel):
    """单条消歧规则"""
    id: str
    pattern: List[TokenMatcher] = Field(..., min_length=1)
    marker: int = 0
    action: Literal["select", "filter", "remove", "add", "unify"]
    postag: Optional[str] = None
    inflection: Optional[str] = None
    unify: Optional[str] = None

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def check_action(self) -> "DisambiguationRule":
        if not 0 <= self.marker < len(self.pattern):
            raise ValueError(
                f"rule {self.id}: marker {self.marker} outside pattern of length {len(self.pattern)}"
            )

        if self.action == "unify":
            if self.unify is None:
                raise ValueError(f"rule {self.id}: unify action requires 'unify'")
            _check_regex(self.unify)
            if _compile(self.unify).groups < 1:
                raise ValueError(f"rule {self.id}: 'unify' needs a capture group")
            return self

        if self.postag is None:
            raise ValueError(f"rule {self.id}: {self.action} action requires 'postag'")

        # filter/remove 的 postag/inflection 是正则，select/add 的是字面值
        if self.action in ("filter", "remove"):
            _check_regex(self.postag)
            _check_regex(self.inflection)

        return self

    def matches_at(self, tokens: List[Token], start: int) -> bool:
        return all(
            matcher.matches(token)
            for matcher, token in zip(self.pattern, tokens[start:start + len(self.pattern)])
        )


class RuleSet(BaseModel):
    """规则文件"""
    rules: List[DisambiguationRule] = Field(default_factory=list)


def _reading_matches(rule: DisambiguationRule, reading: Tag) -> bool:
    inflection, postag = reading
    if not _compile(rule.postag).fullmatch(postag):
        return False
    if rule.inflection is not None:
        return _compile(rule.inflection, True).fullmatch(inflection) is not None
    return True


def _select(rule: DisambiguationRule, window: List[Token]):
    target = window[rule.marker]
    target.tags = [(rule.inflection or target.lower, rule.postag)]


def _filter(rule: DisambiguationRule, window: List[Token]):
    target = window[rule.marker]
    kept = [reading for reading in target.tags if _reading_matches(rule, reading)]
    if kept:
        target.tags = kept


def _remove(rule: DisambiguationRule, window: List[Token]):
    target = window[rule.marker]
    target.tags = [reading for reading in target.tags if not _reading_matches(rule, reading)]


def _add(rule: DisambiguationRule, window: List[Token]):
    target = window[rule.marker]
    reading = (rule.inflection or target.lower, rule.postag)
    if reading not in target.tags:
        target.tags.append(reading)


def _feature(rule: DisambiguationRule, reading: Tag) -> Optional[str]:
    match = _compile(rule.unify).search(reading[1])
    return match.group(1) if match else None


def _unify(rule: DisambiguationRule, window: List[Token]):
    participants = [token for token in window if token.tags and not token.is_sent_start]
    if len(participants) < 2:
        return

    common = None
    for token in participants:
        features = {_feature(rule, reading) for reading in token.tags} - {None}
        common = features if common is None else common & features

    if not common:
        return

    for token in participants:
        token.tags = [reading for reading in token.tags if _feature(rule, reading) in common]


ACTIONS: Dict[str, Callable[[DisambiguationRule, List[Token]], None]] = {
    "select": _select,
    "filter": _filter,
    "remove": _remove,
    "add": _add,
    "unify": _unify,
}


class Disambiguator:
    """规则消歧器（加载后只读）"""

    def __init__(self, rules: Optional[List[DisambiguationRule]] = None):
        self.rules = tuple(rules or ())

    @classmethod
    def empty(cls) -> "Disambiguator":
        """不含规则的消歧器（原样返回）"""
        return cls()

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Disambiguator":
        """
        加载 JSON 规则文件

        Raises:
            DisambiguatorLoadError: 文件无法读取、JSON 无效或规则不合法
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            rule_set = RuleSet.model_validate(data)
        except OSError as e:
            raise DisambiguatorLoadError(f"cannot read rule file: {e}", path=path) from e
        except ValueError as e:
            # json.JSONDecodeError 和 pydantic.ValidationError 都是 ValueError
            raise DisambiguatorLoadError(f"invalid rule file: {e}", path=path) from e

        logger.info("loaded %d disambiguation rules from %s", len(rule_set.rules), path)
        return cls(rule_set.rules)

    def apply(self, tokens: List[Token]) -> List[Token]:
        """
        对 token 序列消歧

        Args:
            tokens: 以句首哨兵开头的 token 序列（不会被修改）

        Returns:
            新的 token 序列，长度不变
        """
        tokens = [replace(token, tags=list(token.tags), postags=list(token.postags)) for token in tokens]

        for rule in self.rules:
            self._apply_rule(rule, tokens)

        return tokens

    def _apply_rule(self, rule: DisambiguationRule, tokens: List[Token]):
        action = ACTIONS[rule.action]
        size = len(rule.pattern)

        for start in range(len(tokens) - size + 1):
            if not rule.matches_at(tokens, start):
                continue

            window = tokens[start:start + size]
            if rule.action != "unify" and window[rule.marker].is_sent_start:
                continue

            action(rule, window)

    def __len__(self) -> int:
        return len(self.rules)
