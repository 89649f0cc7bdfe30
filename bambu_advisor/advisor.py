"""
자문 파이프라인 - 도구별 분류기 + 조합기 연결

각 함수는 검증된 요청을 받아 마크다운 문서 하나를 반환합니다.
요청/콘텐츠 저장소는 변경하지 않으며 같은 입력이면 항상 같은 문서를 반환합니다.

- get_file_format_info: 파일 포맷 직접 조회
- get_3mf_info: 3MF 항목 직접 조회
- recommend_print_settings: 파라미터별 독립 섹션 + 일반 팁
- troubleshoot_issue: 다중 매칭 (0건이면 일반 진단 절차)
- select_material: 우선순위 첫 매칭 + 비교표/결정 트리
"""
import logging
from typing import List, Optional

from .composer import Composer
from .kb import ContentStore
from .models import (
    AdvisoryDomain,
    FileFormatRequest,
    MaterialReference,
    MaterialSelectionRequest,
    PrintSettingsRequest,
    Section,
    SettingsExtra,
    ThreeMFInfoRequest,
    TroubleshootRequest,
)
from .rules import (
    FILAMENT_CLASSIFIER,
    FORMAT_CLASSIFIER,
    INFILL_CLASSIFIER,
    ISSUE_CLASSIFIER,
    ISSUE_FALLBACK,
    LAYER_HEIGHT_CLASSIFIER,
    MATERIAL_CLASSIFIER,
    SPEED_CLASSIFIER,
    THREEMF_CLASSIFIER,
)

logger = logging.getLogger(__name__)

PRINT_SETTINGS_TITLE = "**Print Settings Recommendations for Bambu Studio**"
MATERIAL_SELECTION_TITLE = "**Material Selection Guide**"

# 재료 추천 뒤에 항상 붙는 섹션 (순서 고정)
MATERIAL_REFERENCE_ORDER = [
    MaterialReference.COMPARISON_TABLE,
    MaterialReference.DECISION_TREE,
    MaterialReference.STUDIO_PROFILES,
]


def format_number(value: float) -> str:
    """요청값 표시용 - 정수값은 소수점 없이 (60.0 → "60", 0.2 → "0.2")"""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def get_file_format_info(request: FileFormatRequest, store: Optional[ContentStore] = None) -> str:
    """파일 포맷 안내"""
    composer = Composer(AdvisoryDomain.FILE_FORMAT, store)
    topic = FORMAT_CLASSIFIER.classify(request.format)
    return composer.compose(matched=[composer.section(topic)])


def get_3mf_info(request: ThreeMFInfoRequest, store: Optional[ContentStore] = None) -> str:
    """3MF 프로젝트 파일 안내"""
    composer = Composer(AdvisoryDomain.THREEMF, store)
    topic = THREEMF_CLASSIFIER.classify(request.aspect)
    return composer.compose(matched=[composer.section(topic)])


def recommend_print_settings(request: PrintSettingsRequest, store: Optional[ContentStore] = None) -> str:
    """
    출력 설정 추천

    주어진 파라미터마다 섹션 하나 (재료 → 레이어 높이 → 인필 → 속도 순).
    파라미터가 하나도 없으면 일반 팁만 반환.
    """
    composer = Composer(AdvisoryDomain.PRINT_SETTINGS, store)
    sections: List[Section] = []

    material = (request.material or "").strip()
    if material:
        family = FILAMENT_CLASSIFIER.classify(material)
        sections.append(composer.section(family, header=f"**Material: {material.upper()}**"))

    if request.layer_height is not None:
        value = format_number(request.layer_height)
        bucket = LAYER_HEIGHT_CLASSIFIER.classify(request.layer_height)
        sections.append(composer.section(bucket, header=f"**Layer Height: {value}mm**", value=value))

    if request.infill is not None:
        value = format_number(request.infill)
        bucket = INFILL_CLASSIFIER.classify(request.infill)
        sections.append(composer.section(bucket, header=f"**Infill: {value}%**", value=value))

    if request.print_speed is not None:
        value = format_number(request.print_speed)
        bucket = SPEED_CLASSIFIER.classify(request.print_speed)
        sections.append(composer.section(bucket, header=f"**Print Speed: {value} mm/s**", value=value))

    logger.debug(f"Print settings sections: {[s.category.value for s in sections]}")

    return composer.compose(
        preamble=[PRINT_SETTINGS_TITLE],
        matched=sections,
        always=[composer.section(SettingsExtra.GENERAL_TIPS)],
    )


def troubleshoot_issue(request: TroubleshootRequest, store: Optional[ContentStore] = None) -> str:
    """
    문제 진단

    증상 텍스트에 매칭된 모든 카테고리를 선언 순서로 렌더링.
    매칭 0건이면 일반 진단 절차 섹션.
    """
    composer = Composer(AdvisoryDomain.TROUBLESHOOT, store)

    title_lines = [f"**Troubleshooting: {request.issue}**"]
    if request.printer_model and request.printer_model.strip():
        title_lines.append(f"**Printer Model: {request.printer_model.strip()}**")

    result = ISSUE_CLASSIFIER.classify(request.issue)
    categories = result.categories if result.matched else (ISSUE_FALLBACK,)
    if not result.matched:
        logger.info("No issue category matched, using general troubleshooting")

    return composer.compose(
        preamble=["\n".join(title_lines)],
        matched=[composer.section(category) for category in categories],
    )


def select_material(request: MaterialSelectionRequest, store: Optional[ContentStore] = None) -> str:
    """
    재료 선택 추천

    우선순위 첫 매칭으로 추천 섹션 1개 + 비교표/결정 트리/프로파일 안내
    """
    composer = Composer(AdvisoryDomain.MATERIAL, store)

    summary_lines = [f"**Part Type**: {request.part_type}"]
    if request.requirements:
        summary_lines.append(f"**Requirements**: {request.requirements}")

    choice = MATERIAL_CLASSIFIER.classify(request)

    return composer.compose(
        preamble=[MATERIAL_SELECTION_TITLE, "\n".join(summary_lines)],
        matched=[composer.section(choice)],
        always=[composer.section(reference) for reference in MATERIAL_REFERENCE_ORDER],
    )
