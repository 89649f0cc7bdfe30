"""
자문 파이프라인 테스트 (도구별 문서 생성)
"""
import pytest

from bambu_advisor.advisor import (
    MATERIAL_SELECTION_TITLE,
    PRINT_SETTINGS_TITLE,
    format_number,
    get_3mf_info,
    get_file_format_info,
    recommend_print_settings,
    select_material,
    troubleshoot_issue,
)
from bambu_advisor.composer import SECTION_SEPARATOR
from bambu_advisor.models import (
    FileFormat,
    FileFormatRequest,
    MaterialSelectionRequest,
    PrintSettingsRequest,
    ThreeMFAspect,
    ThreeMFInfoRequest,
    TroubleshootRequest,
)

GENERAL_TIPS_HEADER = "**General Bambu Studio Tips**"
GENERAL_TROUBLESHOOTING_HEADER = "**General Troubleshooting Approach**"


class TestFormatNumber:
    @pytest.mark.parametrize("value,expected", [
        (60, "60"),
        (60.0, "60"),
        (0.2, "0.2"),
        (0.12, "0.12"),
        (15.5, "15.5"),
    ])
    def test_format(self, value, expected):
        assert format_number(value) == expected


class TestFileFormatInfo:
    """파일 포맷 안내"""

    def test_every_format_distinct(self):
        """포맷마다 비어있지 않은 서로 다른 문서"""
        documents = {
            file_format: get_file_format_info(FileFormatRequest(format=file_format))
            for file_format in FileFormat
        }
        assert all(text.strip() for text in documents.values())
        assert len(set(documents.values())) == len(FileFormat)

    def test_stl(self):
        text = get_file_format_info(FileFormatRequest(format="STL"))
        assert text.startswith("**STL (STereoLithography) File Format**")

    def test_step_mentions_cad(self):
        text = get_file_format_info(FileFormatRequest(format=FileFormat.STEP))
        assert "CAD" in text


class TestThreeMFInfo:
    """3MF 안내"""

    def test_all_overview(self):
        """"all"은 구조/호환성/메타데이터를 모두 언급하는 요약"""
        text = get_3mf_info(ThreeMFInfoRequest(aspect="all"))
        lowered = text.lower()
        assert text.startswith("**Complete 3MF Guide for Bambu Studio**")
        for term in ("structure", "compatibility", "metadata"):
            assert term in lowered

    def test_all_is_not_concatenation(self):
        structure = get_3mf_info(ThreeMFInfoRequest(aspect=ThreeMFAspect.STRUCTURE))
        overview = get_3mf_info(ThreeMFInfoRequest(aspect=ThreeMFAspect.ALL))
        assert structure not in overview

    def test_compatibility(self):
        text = get_3mf_info(ThreeMFInfoRequest(aspect="compatibility"))
        assert "Generic 3MF" in text


class TestRecommendPrintSettings:
    """출력 설정 추천"""

    def test_full_request_order(self):
        """재료 → 레이어 → 인필 → 속도 → 일반 팁, 각 1회"""
        text = recommend_print_settings(PrintSettingsRequest(
            material="PETG", layerHeight=0.2, infill=20, printSpeed=60,
        ))
        blocks = [
            PRINT_SETTINGS_TITLE,
            "**Material: PETG**",
            "**PETG Settings**",
            "**Layer Height: 0.2mm**",
            "**Standard/Balanced Settings** (0.2mm)",
            "**Infill: 20%**",
            "**Standard Infill (20%)**",
            "**Print Speed: 60 mm/s**",
            "**Standard Speed (60 mm/s)**",
            GENERAL_TIPS_HEADER,
        ]
        positions = []
        for block in blocks:
            assert text.count(block) == 1, block
            positions.append(text.index(block))
        assert positions == sorted(positions)

    def test_no_parameters(self):
        """파라미터 없으면 제목 + 일반 팁만"""
        text = recommend_print_settings(PrintSettingsRequest())
        assert text.startswith(PRINT_SETTINGS_TITLE + SECTION_SEPARATOR + GENERAL_TIPS_HEADER)
        assert "**Material:" not in text

    def test_blank_material_ignored(self):
        text = recommend_print_settings(PrintSettingsRequest(material="   "))
        assert "**Material:" not in text

    def test_unknown_material_generic(self):
        text = recommend_print_settings(PrintSettingsRequest(material="nylon"))
        assert "**Material: NYLON**" in text
        assert "**General Material Guidance**" in text

    def test_vase_infill(self):
        text = recommend_print_settings(PrintSettingsRequest(infill=0))
        assert "**Infill: 0%**" in text
        assert "**0% Infill (Vase Mode)**" in text

    def test_layer_boundary(self):
        """0.12mm는 정밀 구간 (상한 포함)"""
        text = recommend_print_settings(PrintSettingsRequest(layerHeight=0.12))
        assert "**Fine/Detail Settings** (0.12mm)" in text

    def test_idempotent(self):
        request = PrintSettingsRequest(material="ABS", infill=80, printSpeed=200)
        assert recommend_print_settings(request) == recommend_print_settings(request)


class TestTroubleshootIssue:
    """문제 진단"""

    def test_title_and_model(self):
        text = troubleshoot_issue(TroubleshootRequest(issue="stringing", printerModel="P1S"))
        assert text.startswith("**Troubleshooting: stringing**\n**Printer Model: P1S**")
        assert "**Stringing / Oozing Issues**" in text

    def test_blank_printer_model_omitted(self):
        text = troubleshoot_issue(TroubleshootRequest(issue="clog", printerModel=" "))
        assert "Printer Model" not in text

    def test_multi_match_declared_order(self):
        """경고 문구 순서와 무관하게 선언 순서로 렌더링"""
        text = troubleshoot_issue(TroubleshootRequest(issue="warping corners and stringing"))
        stringing = text.index("**Stringing / Oozing Issues**")
        warping = text.index("**Warping / Corner Lifting Issues**")
        assert stringing < warping
        assert GENERAL_TROUBLESHOOTING_HEADER not in text

    def test_fallback(self):
        """매칭 0건이면 일반 진단 절차 하나만"""
        text = troubleshoot_issue(TroubleshootRequest(issue="completely unrelated text"))
        assert text.count(GENERAL_TROUBLESHOOTING_HEADER) == 1
        assert "**Stringing / Oozing Issues**" not in text

    def test_idempotent(self):
        request = TroubleshootRequest(issue="first layer not sticking")
        assert troubleshoot_issue(request) == troubleshoot_issue(request)


class TestSelectMaterial:
    """재료 선택"""

    def test_default_pla(self):
        text = select_material(MaterialSelectionRequest(partType="thing", requirements=""))
        assert text.startswith(MATERIAL_SELECTION_TITLE + SECTION_SEPARATOR + "**Part Type**: thing")
        assert "**Requirements**" not in text
        assert "**Recommended: PLA (Polylactic Acid)**" in text

    def test_flexible_only(self):
        """유연성 + 야외 요구사항이면 TPU 추천만"""
        text = select_material(MaterialSelectionRequest(
            partType="gasket", requirements="flexible, outdoor use",
        ))
        assert "**Recommended: TPU (Thermoplastic Polyurethane)**" in text
        assert "**Recommended: ASA (Acrylonitrile Styrene Acrylate)**" not in text
        assert "**Requirements**: flexible, outdoor use" in text

    def test_reference_sections_always_last(self):
        text = select_material(MaterialSelectionRequest(partType="functional bracket"))
        recommended = text.index("**Recommended: PETG or Nylon**")
        table = text.index("**Material Comparison Quick Reference**")
        tree = text.index("**Decision Tree**")
        profiles = text.index("**Bambu Studio Material Profiles**")
        assert recommended < table < tree < profiles
