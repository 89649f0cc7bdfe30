"""
어드바이저 데이터 모델

- 도메인/카테고리 Enum (카테고리 집합은 도메인별로 고정)
- 도구 요청 모델 (pydantic, 와이어 필드명은 camelCase)
- 렌더링 단위 Section
"""
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, Strict


class AdvisoryDomain(str, Enum):
    """자문 도메인"""
    FILE_FORMAT = "file_format"
    THREEMF = "3mf"
    PRINT_SETTINGS = "print_settings"
    TROUBLESHOOT = "troubleshoot"
    MATERIAL = "material"


# ============================================================
# 입력 Enum
# ============================================================
class FileFormat(str, Enum):
    """지원 파일 포맷"""
    STL = "STL"
    THREEMF = "3MF"
    GCODE = "GCODE"
    OBJ = "OBJ"
    STEP = "STEP"


class ThreeMFAspect(str, Enum):
    """3MF 안내 항목"""
    STRUCTURE = "structure"
    COMPATIBILITY = "compatibility"
    METADATA = "metadata"
    ALL = "all"


# ============================================================
# 카테고리 Enum (콘텐츠 저장소 키)
# ============================================================
class FormatTopic(str, Enum):
    """파일 포맷 안내 카테고리"""
    STL = "stl"
    THREEMF = "3mf"
    GCODE = "gcode"
    OBJ = "obj"
    STEP = "step"
    UNKNOWN = "unknown-format"


class ThreeMFTopic(str, Enum):
    """3MF 안내 카테고리"""
    STRUCTURE = "structure"
    COMPATIBILITY = "compatibility"
    METADATA = "metadata"
    OVERVIEW = "all"
    UNKNOWN = "unknown-aspect"


class FilamentFamily(str, Enum):
    """출력 설정용 필라멘트 계열"""
    PLA = "pla"
    PETG = "petg"
    ABS = "abs"
    FLEXIBLE = "flexible"
    GENERIC = "generic-material"


class LayerHeightBucket(str, Enum):
    """레이어 높이 구간"""
    FINE = "layer-fine"
    STANDARD = "layer-standard"
    DRAFT = "layer-draft"
    ROUGH = "layer-rough"


class InfillBucket(str, Enum):
    """인필 구간"""
    VASE = "infill-vase"
    LOW = "infill-low"
    STANDARD = "infill-standard"
    HIGH = "infill-high"
    SOLID = "infill-solid"


class SpeedBucket(str, Enum):
    """출력 속도 구간"""
    SLOW = "speed-slow"
    STANDARD = "speed-standard"
    FAST = "speed-fast"
    VERY_FAST = "speed-very-fast"


class SettingsExtra(str, Enum):
    """출력 설정 - 항상 붙는 섹션"""
    GENERAL_TIPS = "general-tips"


class IssueCategory(str, Enum):
    """문제 진단 카테고리 (선언 순서 = 렌더링 순서)"""
    ADHESION = "adhesion"
    STRINGING = "stringing"
    LAYER_SHIFTING = "layer-shifting"
    WARPING = "warping"
    CLOGGING = "clogging"
    PRINT_QUALITY = "print-quality"
    SOFTWARE = "software"
    GENERAL = "general-troubleshooting"  # 미매칭 시 폴백


class MaterialChoice(str, Enum):
    """재료 추천 카테고리"""
    FLEXIBLE = "flexible-material"
    HEAT_RESISTANT = "heat-resistant"
    OUTDOOR = "outdoor"
    FOOD_SAFE = "food-safe"
    FINE_DETAIL = "fine-detail"
    STRENGTH = "strength"
    GENERAL_PURPOSE = "general-purpose"  # 기본값


class MaterialReference(str, Enum):
    """재료 추천 - 항상 붙는 섹션"""
    COMPARISON_TABLE = "comparison-table"
    DECISION_TREE = "decision-tree"
    STUDIO_PROFILES = "studio-profiles"


# 도메인별 카테고리 집합 - 콘텐츠 저장소는 이 집합 전체를 커버해야 함
DOMAIN_CATEGORIES: Dict[AdvisoryDomain, List[Type[Enum]]] = {
    AdvisoryDomain.FILE_FORMAT: [FormatTopic],
    AdvisoryDomain.THREEMF: [ThreeMFTopic],
    AdvisoryDomain.PRINT_SETTINGS: [
        FilamentFamily, LayerHeightBucket, InfillBucket, SpeedBucket, SettingsExtra,
    ],
    AdvisoryDomain.TROUBLESHOOT: [IssueCategory],
    AdvisoryDomain.MATERIAL: [MaterialChoice, MaterialReference],
}


# ============================================================
# Request Models
# ============================================================
class ToolRequest(BaseModel):
    """도구 요청 공통 설정 (불변, alias/필드명 모두 허용)"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class FileFormatRequest(ToolRequest):
    """파일 포맷 안내 요청"""
    format: FileFormat = Field(..., description="The file format to get information about")


class ThreeMFInfoRequest(ToolRequest):
    """3MF 안내 요청"""
    aspect: ThreeMFAspect = Field(
        ...,
        description="Which aspect of 3MF to learn about: structure, compatibility with other slicers, metadata, or all",
    )


# 숫자 필드는 strict - "0.2" 같은 문자열이나 true/false는 거부 (int는 허용)
StrictNumber = Annotated[float, Strict()]


class PrintSettingsRequest(ToolRequest):
    """
    출력 설정 추천 요청 - 모든 파라미터 선택

    레이어 높이/속도는 범위 제한 없음 (0 이하도 가장 낮은 구간으로 분류)
    """
    material: Optional[str] = Field(None, description="Material type (e.g., PLA, PETG, ABS, TPU)")
    layer_height: Optional[StrictNumber] = Field(
        None, alias="layerHeight", description="Desired layer height in mm (e.g., 0.2)"
    )
    infill: Optional[StrictNumber] = Field(None, ge=0, le=100, description="Infill percentage (0-100)")
    print_speed: Optional[StrictNumber] = Field(
        None, alias="printSpeed", description="Desired print speed in mm/s"
    )


class TroubleshootRequest(ToolRequest):
    """문제 진단 요청"""
    issue: str = Field(
        ...,
        description="Description of the issue or problem (e.g., 'first layer not sticking', 'stringing', 'layer shifting')",
    )
    printer_model: Optional[str] = Field(
        None, alias="printerModel", description="Bambu Lab printer model (e.g., X1, P1P, A1)"
    )


class MaterialSelectionRequest(ToolRequest):
    """재료 선택 요청"""
    part_type: str = Field(
        ...,
        alias="partType",
        description="Type of part being printed (e.g., 'functional mechanical part', 'decorative item', 'outdoor use')",
    )
    requirements: Optional[str] = Field(
        None,
        description="Specific requirements like strength, flexibility, heat resistance, or aesthetics",
    )


# ============================================================
# Rendering
# ============================================================
@dataclass(frozen=True)
class Section:
    """문서 섹션 - 헤더(선택) + 프래그먼트 본문"""
    category: Enum
    body: str
    header: Optional[str] = None

    def render(self) -> str:
        body = self.body.strip()
        if self.header:
            return f"{self.header}\n\n{body}"
        return body
