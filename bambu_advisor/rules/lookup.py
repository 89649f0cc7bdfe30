"""
직접 조회 분류기 - 파일 포맷 / 3MF 항목
"""
from ..models import FileFormat, FormatTopic, ThreeMFAspect, ThreeMFTopic
from .base import DirectLookupClassifier


FORMAT_CLASSIFIER: DirectLookupClassifier[FormatTopic] = DirectLookupClassifier(
    {
        FileFormat.STL: FormatTopic.STL,
        FileFormat.THREEMF: FormatTopic.THREEMF,
        FileFormat.GCODE: FormatTopic.GCODE,
        FileFormat.OBJ: FormatTopic.OBJ,
        FileFormat.STEP: FormatTopic.STEP,
    },
    fallback=FormatTopic.UNKNOWN,
    name="file_format",
)

# "all"은 다른 항목을 조합하지 않는 독립 카테고리
THREEMF_CLASSIFIER: DirectLookupClassifier[ThreeMFTopic] = DirectLookupClassifier(
    {
        ThreeMFAspect.STRUCTURE: ThreeMFTopic.STRUCTURE,
        ThreeMFAspect.COMPATIBILITY: ThreeMFTopic.COMPATIBILITY,
        ThreeMFAspect.METADATA: ThreeMFTopic.METADATA,
        ThreeMFAspect.ALL: ThreeMFTopic.OVERVIEW,
    },
    fallback=ThreeMFTopic.UNKNOWN,
    name="3mf_aspect",
)
