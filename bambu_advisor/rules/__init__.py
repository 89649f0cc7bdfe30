"""
룰 매칭 모듈

구조:
- predicates.py: 키워드/구간/동일성 술어
- base.py: 분류기 (다중 매칭, 첫 매칭, 직접 조회, 구간)
- lookup.py: 파일 포맷 / 3MF 항목 직접 조회
- settings.py: 출력 설정 파라미터별 분류
- troubleshoot.py: 문제 진단 다중 매칭
- material.py: 재료 선택 우선순위

사용법:
    from bambu_advisor.rules import ISSUE_CLASSIFIER

    result = ISSUE_CLASSIFIER.classify("stringing and warping")
    result.categories  # (IssueCategory.STRINGING, IssueCategory.WARPING)
"""

from .base import (
    BaseClassifier,
    BucketClassifier,
    DirectLookupClassifier,
    FirstMatchClassifier,
    MatchResult,
    MultiMatchClassifier,
    Rule,
)
from .predicates import Bucket, any_of, contains_any, equals, on_field
from .lookup import FORMAT_CLASSIFIER, THREEMF_CLASSIFIER
from .settings import (
    FILAMENT_CLASSIFIER,
    INFILL_CLASSIFIER,
    LAYER_HEIGHT_CLASSIFIER,
    SPEED_CLASSIFIER,
)
from .troubleshoot import ISSUE_CLASSIFIER, ISSUE_FALLBACK
from .material import MATERIAL_CLASSIFIER

__all__ = [
    'BaseClassifier',
    'BucketClassifier',
    'DirectLookupClassifier',
    'FirstMatchClassifier',
    'MatchResult',
    'MultiMatchClassifier',
    'Rule',
    'Bucket',
    'any_of',
    'contains_any',
    'equals',
    'on_field',
    'FORMAT_CLASSIFIER',
    'THREEMF_CLASSIFIER',
    'FILAMENT_CLASSIFIER',
    'INFILL_CLASSIFIER',
    'LAYER_HEIGHT_CLASSIFIER',
    'SPEED_CLASSIFIER',
    'ISSUE_CLASSIFIER',
    'ISSUE_FALLBACK',
    'MATERIAL_CLASSIFIER',
]
