"""
문제 진단 분류기 - 다중 매칭

증상 텍스트를 모든 카테고리와 비교하고 매칭된 카테고리를 아래 선언 순서대로 반환.
입력 문장 내 키워드 순서와 무관하게 렌더링 순서가 고정됨.
"""
from ..models import IssueCategory
from .base import MultiMatchClassifier, Rule
from .predicates import contains_any


ISSUE_RULES = [
    Rule(IssueCategory.ADHESION, contains_any("adhesion", "stick", "first layer")),
    Rule(IssueCategory.STRINGING, contains_any("string", "oozing", "hair")),
    Rule(IssueCategory.LAYER_SHIFTING, contains_any("layer shift", "misalign", "offset")),
    Rule(IssueCategory.WARPING, contains_any("warp", "corner", "lift")),
    Rule(IssueCategory.CLOGGING, contains_any("clog", "jam", "under-extru")),
    Rule(
        IssueCategory.PRINT_QUALITY,
        contains_any("quality", "rough", "blobbing", "ringing", "ghosting"),
    ),
    Rule(IssueCategory.SOFTWARE, contains_any("software", "crash", "freeze", "error")),
]

ISSUE_CLASSIFIER: MultiMatchClassifier[IssueCategory] = MultiMatchClassifier(
    ISSUE_RULES, name="issue"
)

# 매칭 0건일 때 사용
ISSUE_FALLBACK = IssueCategory.GENERAL
