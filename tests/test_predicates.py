"""
술어 라이브러리 테스트
"""
import pytest

from bambu_advisor.errors import ContentStoreError
from bambu_advisor.models import InfillBucket, PrintSettingsRequest, SpeedBucket
from bambu_advisor.rules.predicates import (
    Bucket,
    any_of,
    contains_any,
    equals,
    find_bucket,
    on_field,
    validate_buckets,
)


class TestContainsAny:
    """키워드 포함 술어"""

    def test_case_insensitive(self):
        """대소문자 무시"""
        predicate = contains_any("string")
        assert predicate("STRINGING everywhere") is True
        assert predicate("Stringy") is True

    def test_substring_match(self):
        """부분 문자열 매칭 (단어 경계 없음)"""
        assert contains_any("warp")("warped corners") is True
        assert contains_any("pla")("explanation") is True

    def test_empty_and_none_never_match(self):
        """None/빈 문자열은 매칭 안 됨"""
        predicate = contains_any("stick")
        assert predicate(None) is False
        assert predicate("") is False

    def test_no_keyword(self):
        """어떤 키워드도 없으면 False"""
        assert contains_any("clog", "jam")("perfect print") is False


class TestFieldPredicates:
    """필드/결합 술어"""

    def test_equals(self):
        assert equals("3MF")("3MF") is True
        assert equals("3MF")("STL") is False

    def test_on_field(self):
        """요청 필드에 술어 적용"""
        request = PrintSettingsRequest(material="PETG")
        assert on_field("material", contains_any("petg"))(request) is True
        assert on_field("material", contains_any("abs"))(request) is False

    def test_on_field_missing_value(self):
        """값 없는 필드는 매칭 안 됨"""
        request = PrintSettingsRequest()
        assert on_field("material", contains_any("pla"))(request) is False

    def test_any_of(self):
        predicate = any_of(contains_any("strong"), contains_any("tough"))
        assert predicate("very tough part") is True
        assert predicate("pretty part") is False


class TestBuckets:
    """구간 테이블"""

    @pytest.fixture
    def speed_buckets(self):
        return [
            Bucket(SpeedBucket.SLOW, 40),
            Bucket(SpeedBucket.STANDARD, 80),
            Bucket(SpeedBucket.FAST, 150),
            Bucket(SpeedBucket.VERY_FAST),
        ]

    def test_upper_bound_inclusive(self, speed_buckets):
        """상한값은 해당 구간에 포함"""
        assert find_bucket(40, speed_buckets).category == SpeedBucket.SLOW
        assert find_bucket(40.01, speed_buckets).category == SpeedBucket.STANDARD
        assert find_bucket(150, speed_buckets).category == SpeedBucket.FAST

    def test_last_bucket_unbounded(self, speed_buckets):
        """마지막 구간은 상한 없음"""
        assert find_bucket(10_000, speed_buckets).category == SpeedBucket.VERY_FAST

    def test_valid_table(self, speed_buckets):
        validate_buckets(speed_buckets)

    def test_reject_non_increasing(self):
        """상한이 증가하지 않으면 거부"""
        with pytest.raises(ContentStoreError):
            validate_buckets([
                Bucket(InfillBucket.LOW, 20),
                Bucket(InfillBucket.STANDARD, 20),
                Bucket(InfillBucket.SOLID),
            ])

    def test_reject_bounded_last(self):
        """마지막 구간에 상한이 있으면 빈틈 - 거부"""
        with pytest.raises(ContentStoreError):
            validate_buckets([
                Bucket(InfillBucket.LOW, 10),
                Bucket(InfillBucket.SOLID, 100),
            ])

    def test_reject_unbounded_middle(self):
        with pytest.raises(ContentStoreError):
            validate_buckets([
                Bucket(InfillBucket.LOW),
                Bucket(InfillBucket.SOLID),
            ])

    def test_reject_empty(self):
        with pytest.raises(ContentStoreError):
            validate_buckets([])
