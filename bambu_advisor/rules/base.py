"""
분류기 기본 구현

세 가지 형태:
1. MultiMatchClassifier: 모든 룰 평가, 선언 순서로 매칭 수집 (문제 진단)
2. FirstMatchClassifier: 우선순위 순으로 첫 매칭 반환, 없으면 기본값 (재료 선택)
3. DirectLookupClassifier / BucketClassifier: Enum 값/수치 → 단일 카테고리

분류기는 요청과 콘텐츠 저장소를 변경하지 않음 (입력에 대한 순수 함수)
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Iterable, List, Sequence, Tuple, TypeVar

from .predicates import Bucket, Predicate, find_bucket, validate_buckets

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=Enum)


# ============================================================
# 결과 타입 정의
# ============================================================
@dataclass(frozen=True)
class Rule(Generic[C]):
    """(술어, 카테고리) 쌍"""
    category: C
    predicate: Predicate

    def matches(self, subject: Any) -> bool:
        return bool(self.predicate(subject))


@dataclass(frozen=True)
class MatchResult(Generic[C]):
    """다중 매칭 결과 - 매칭 없음과 폴백 카테고리를 구분"""
    categories: Tuple[C, ...] = ()

    @property
    def matched(self) -> bool:
        return len(self.categories) > 0

    @property
    def count(self) -> int:
        return len(self.categories)


# ============================================================
# 분류기
# ============================================================
class BaseClassifier(ABC):
    """분류기 추상 클래스"""

    name = "base"

    @abstractmethod
    def classify(self, subject: Any) -> Any:
        """요청(또는 필드 값)을 카테고리로 분류"""


class MultiMatchClassifier(BaseClassifier, Generic[C]):
    """
    다중 매칭 분류기

    모든 룰을 끝까지 평가하고 매칭된 카테고리를 룰 선언 순서로 반환.
    같은 카테고리가 여러 룰로 매칭되어도 한 번만 포함.
    """

    def __init__(self, rules: Iterable[Rule[C]], name: str = "multi_match"):
        self.rules: Tuple[Rule[C], ...] = tuple(rules)
        self.name = name

    def classify(self, subject: Any) -> MatchResult[C]:
        hits: List[C] = []
        for rule in self.rules:
            if rule.matches(subject) and rule.category not in hits:
                hits.append(rule.category)

        logger.debug(f"[{self.name}] matched {[c.value for c in hits]}")
        return MatchResult(categories=tuple(hits))

    @property
    def declared_order(self) -> List[C]:
        order: List[C] = []
        for rule in self.rules:
            if rule.category not in order:
                order.append(rule.category)
        return order


class FirstMatchClassifier(BaseClassifier, Generic[C]):
    """
    첫 매칭 분류기

    룰 순서가 곧 우선순위. 첫 매칭에서 평가 중단, 없으면 default.
    """

    def __init__(self, rules: Iterable[Rule[C]], default: C, name: str = "first_match"):
        self.rules: Tuple[Rule[C], ...] = tuple(rules)
        self.default = default
        self.name = name

    def classify(self, subject: Any) -> C:
        for rule in self.rules:
            if rule.matches(subject):
                logger.debug(f"[{self.name}] first match: {rule.category.value}")
                return rule.category

        logger.debug(f"[{self.name}] no match, default: {self.default.value}")
        return self.default

    @property
    def priority(self) -> List[C]:
        return [rule.category for rule in self.rules]


class DirectLookupClassifier(BaseClassifier, Generic[C]):
    """
    Enum 값 → 카테고리 직접 매핑

    상위 검증을 통과했다면 fallback은 도달하지 않음
    """

    def __init__(self, mapping: Dict[Any, C], fallback: C, name: str = "direct_lookup"):
        self.mapping = dict(mapping)
        self.fallback = fallback
        self.name = name

    def classify(self, value: Any) -> C:
        category = self.mapping.get(value)
        if category is None:
            logger.warning(f"[{self.name}] unknown value {value!r}, using fallback")
            return self.fallback
        return category


class BucketClassifier(BaseClassifier, Generic[C]):
    """수치 구간 분류기 - 구간 테이블은 생성 시 검증"""

    def __init__(self, buckets: Sequence[Bucket], name: str = "bucket"):
        validate_buckets(buckets)
        self.buckets: Tuple[Bucket, ...] = tuple(buckets)
        self.name = name

    def classify(self, value: float) -> C:
        bucket = find_bucket(value, self.buckets)
        logger.debug(f"[{self.name}] {value} -> {bucket.category.value}")
        return bucket.category
