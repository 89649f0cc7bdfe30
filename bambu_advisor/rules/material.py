"""
재료 선택 분류기 - 첫 매칭

우선순위 (높은 순):
1. 유연성 (TPU)
2. 내열성 (ABS/ASA)
3. 야외/UV (ASA)
4. 식품 안전 (Food-safe PLA/PETG)
5. 정밀 디테일 (PLA)
6. 강도/기능성 (PETG/Nylon) - 요구사항 키워드 또는 파트 타입 키워드
7. 기본값: 범용 PLA

순서가 곧 정책: "flexible outdoor" 요구사항은 항상 TPU만 추천.
"""
from ..models import MaterialChoice
from .base import FirstMatchClassifier, Rule
from .predicates import any_of, contains_any, on_field


MATERIAL_RULES = [
    Rule(MaterialChoice.FLEXIBLE, on_field("requirements", contains_any("flex", "bend", "elastic"))),
    Rule(MaterialChoice.HEAT_RESISTANT, on_field("requirements", contains_any("heat", "hot", "temperature"))),
    Rule(MaterialChoice.OUTDOOR, on_field("requirements", contains_any("outdoor", "sun", "uv", "weather"))),
    Rule(MaterialChoice.FOOD_SAFE, on_field("requirements", contains_any("food", "safe"))),
    Rule(MaterialChoice.FINE_DETAIL, on_field("requirements", contains_any("detail", "smooth", "fine"))),
    Rule(
        MaterialChoice.STRENGTH,
        any_of(
            on_field("requirements", contains_any("strong", "tough", "durable")),
            on_field("part_type", contains_any("functional", "mechanical")),
        ),
    ),
]

MATERIAL_CLASSIFIER: FirstMatchClassifier[MaterialChoice] = FirstMatchClassifier(
    MATERIAL_RULES, default=MaterialChoice.GENERAL_PURPOSE, name="material"
)
