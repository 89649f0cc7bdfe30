"""
술어 라이브러리 - 요청 필드 검사용 순수 함수

- contains_any: 대소문자 무시 부분 문자열 포함
- equals: Enum/값 동일성
- on_field / any_of: 요청 객체 필드 적용 및 OR 결합
- Bucket / find_bucket: 구간 매칭 (상한 포함, 마지막 구간은 무한대)
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Sequence

from ..errors import ContentStoreError

Predicate = Callable[[Any], bool]


def contains_any(*keywords: str) -> Predicate:
    """텍스트에 키워드 중 하나라도 포함되면 True (None/빈 문자열은 False)"""
    vocabulary = tuple(kw.lower() for kw in keywords)

    def predicate(text: Optional[str]) -> bool:
        if not text:
            return False
        lowered = text.lower()
        return any(kw in lowered for kw in vocabulary)

    return predicate


def equals(expected: Any) -> Predicate:
    """값 동일성"""
    def predicate(value: Any) -> bool:
        return value == expected

    return predicate


def on_field(field_name: str, predicate: Predicate) -> Predicate:
    """요청 객체의 특정 필드에 술어 적용"""
    def field_predicate(request: Any) -> bool:
        return predicate(getattr(request, field_name, None))

    return field_predicate


def any_of(*predicates: Predicate) -> Predicate:
    """술어 OR 결합"""
    def combined(subject: Any) -> bool:
        return any(p(subject) for p in predicates)

    return combined


@dataclass(frozen=True)
class Bucket:
    """수치 구간 - upper 이하이면 매칭 (None = 상한 없음)"""
    category: Enum
    upper: Optional[float] = None

    def contains(self, value: float) -> bool:
        return self.upper is None or value <= self.upper


def validate_buckets(buckets: Sequence[Bucket]) -> None:
    """
    구간 테이블 검증

    - 상한이 엄격히 증가해야 함 (겹침 없음)
    - 마지막 구간만 상한 없음 (빈틈 없음)
    """
    if not buckets:
        raise ContentStoreError("Bucket table is empty")
    if buckets[-1].upper is not None:
        raise ContentStoreError(
            f"Last bucket {buckets[-1].category.value} must be unbounded"
        )
    bounds = [b.upper for b in buckets[:-1]]
    if any(bound is None for bound in bounds):
        raise ContentStoreError("Only the last bucket may be unbounded")
    for lower, upper in zip(bounds, bounds[1:]):
        if upper <= lower:
            raise ContentStoreError(f"Bucket bounds must increase: {lower} -> {upper}")


def find_bucket(value: float, buckets: Sequence[Bucket]) -> Bucket:
    """값이 속하는 첫 구간 반환 (검증된 테이블이면 항상 존재)"""
    for bucket in buckets:
        if bucket.contains(value):
            return bucket
    return buckets[-1]
