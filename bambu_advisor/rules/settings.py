"""
출력 설정 분류기

파라미터별로 독립 분류:
- material: 필라멘트 계열 첫 매칭 (PLA > PETG > ABS > TPU/Flex, 없으면 일반 안내)
- layer_height / infill / print_speed: 구간 분류 (상한 포함)
"""
from ..models import (
    FilamentFamily, InfillBucket, LayerHeightBucket, SpeedBucket
)
from .base import BucketClassifier, FirstMatchClassifier, Rule
from .predicates import Bucket, contains_any


FILAMENT_CLASSIFIER: FirstMatchClassifier[FilamentFamily] = FirstMatchClassifier(
    [
        Rule(FilamentFamily.PLA, contains_any("pla")),
        Rule(FilamentFamily.PETG, contains_any("petg")),
        Rule(FilamentFamily.ABS, contains_any("abs")),
        Rule(FilamentFamily.FLEXIBLE, contains_any("tpu", "flex")),
    ],
    default=FilamentFamily.GENERIC,
    name="filament",
)

# 단위: mm
LAYER_HEIGHT_CLASSIFIER: BucketClassifier[LayerHeightBucket] = BucketClassifier(
    [
        Bucket(LayerHeightBucket.FINE, 0.12),
        Bucket(LayerHeightBucket.STANDARD, 0.20),
        Bucket(LayerHeightBucket.DRAFT, 0.28),
        Bucket(LayerHeightBucket.ROUGH),
    ],
    name="layer_height",
)

# 단위: %, 0%는 vase 모드
INFILL_CLASSIFIER: BucketClassifier[InfillBucket] = BucketClassifier(
    [
        Bucket(InfillBucket.VASE, 0),
        Bucket(InfillBucket.LOW, 10),
        Bucket(InfillBucket.STANDARD, 20),
        Bucket(InfillBucket.HIGH, 50),
        Bucket(InfillBucket.SOLID),
    ],
    name="infill",
)

# 단위: mm/s
SPEED_CLASSIFIER: BucketClassifier[SpeedBucket] = BucketClassifier(
    [
        Bucket(SpeedBucket.SLOW, 40),
        Bucket(SpeedBucket.STANDARD, 80),
        Bucket(SpeedBucket.FAST, 150),
        Bucket(SpeedBucket.VERY_FAST),
    ],
    name="print_speed",
)
