"""
도구 분배기 / 도구 카탈로그 테스트
"""
import pytest

from bambu_advisor.advisor import troubleshoot_issue
from bambu_advisor.dispatcher import ToolDispatcher, get_dispatcher
from bambu_advisor.errors import AdvisorError, UnknownOperation, ValidationError
from bambu_advisor.models import TroubleshootRequest
from bambu_advisor.tools import list_tool_definitions

TOOL_NAMES = [
    "get_file_format_info",
    "get_3mf_info",
    "recommend_print_settings",
    "troubleshoot_issue",
    "select_material",
]


@pytest.fixture
def dispatcher():
    return ToolDispatcher()


class TestToolCatalogue:
    """도구 목록"""

    def test_five_tools(self, dispatcher):
        assert dispatcher.tool_names == TOOL_NAMES
        assert [t.name for t in list_tool_definitions()] == TOOL_NAMES

    def test_camel_case_schema(self, dispatcher):
        """입력 스키마는 camelCase 필드명"""
        schemas = {t.name: t.input_schema for t in dispatcher.list_tools()}
        settings = schemas["recommend_print_settings"]["properties"]
        assert {"material", "layerHeight", "infill", "printSpeed"} <= set(settings)
        assert "layer_height" not in settings
        assert "printerModel" in schemas["troubleshoot_issue"]["properties"]
        assert schemas["troubleshoot_issue"]["required"] == ["issue"]
        assert schemas["select_material"]["required"] == ["partType"]

    def test_enum_in_schema(self, dispatcher):
        schemas = {t.name: t.input_schema for t in dispatcher.list_tools()}
        assert "FileFormat" in str(schemas["get_file_format_info"])

    def test_serialized_alias(self, dispatcher):
        dumped = dispatcher.list_tools()[0].model_dump(by_alias=True)
        assert set(dumped) == {"name", "description", "inputSchema"}


class TestDispatch:
    """도구 실행"""

    def test_dispatch_matches_pipeline(self, dispatcher):
        """분배기 결과 = 파이프라인 직접 호출 결과"""
        text = dispatcher.dispatch("troubleshoot_issue", {"issue": "stringing", "printerModel": "X1"})
        expected = troubleshoot_issue(TroubleshootRequest(issue="stringing", printer_model="X1"))
        assert text == expected

    def test_snake_case_names_accepted(self, dispatcher):
        camel = dispatcher.dispatch("recommend_print_settings", {"layerHeight": 0.2})
        snake = dispatcher.dispatch("recommend_print_settings", {"layer_height": 0.2})
        assert camel == snake

    def test_extra_keys_ignored(self, dispatcher):
        text = dispatcher.dispatch("get_3mf_info", {"aspect": "metadata", "verbose": True})
        assert "**3MF Metadata in Bambu Studio**" in text

    def test_no_arguments_for_optional_tool(self, dispatcher):
        assert dispatcher.dispatch("recommend_print_settings", None)

    def test_singleton(self):
        assert get_dispatcher() is get_dispatcher()


class TestDispatchErrors:
    """에러 처리"""

    def test_unknown_tool(self, dispatcher):
        with pytest.raises(UnknownOperation) as exc_info:
            dispatcher.dispatch("print_model", {})
        assert exc_info.value.error_code == "unknown_operation"
        assert exc_info.value.message == "Unknown tool: print_model"

    def test_tool_name_is_exact(self, dispatcher):
        """대소문자 다르면 다른 도구"""
        with pytest.raises(UnknownOperation):
            dispatcher.dispatch("Troubleshoot_Issue", {"issue": "clog"})

    def test_invalid_enum(self, dispatcher):
        with pytest.raises(ValidationError) as exc_info:
            dispatcher.dispatch("get_file_format_info", {"format": "DXF"})
        assert exc_info.value.error_code == "invalid_arguments"
        assert exc_info.value.errors[0]["field"] == "format"

    def test_infill_out_of_range(self, dispatcher):
        with pytest.raises(ValidationError) as exc_info:
            dispatcher.dispatch("recommend_print_settings", {"infill": 150})
        assert exc_info.value.errors[0]["field"] == "infill"

    @pytest.mark.parametrize("arguments,field", [
        ({"layerHeight": "0.2"}, "layerHeight"),
        ({"infill": True}, "infill"),
        ({"printSpeed": "fast"}, "printSpeed"),
        ({"printSpeed": False}, "printSpeed"),
    ])
    def test_numbers_reject_wrong_type(self, dispatcher, arguments, field):
        """숫자 필드에 문자열/불리언은 변환 없이 거부"""
        with pytest.raises(ValidationError) as exc_info:
            dispatcher.dispatch("recommend_print_settings", arguments)
        assert exc_info.value.errors[0]["field"] == field

    def test_numbers_accept_int(self, dispatcher):
        """정수는 숫자로 허용"""
        text = dispatcher.dispatch("recommend_print_settings", {"infill": 20, "printSpeed": 60})
        assert "**Infill: 20%**" in text
        assert "**Print Speed: 60 mm/s**" in text

    def test_non_positive_numbers_accepted(self, dispatcher):
        """0 이하 레이어 높이/속도도 검증 통과 → 가장 낮은 구간"""
        text = dispatcher.dispatch("recommend_print_settings", {"layerHeight": 0, "printSpeed": -5})
        assert "**Layer Height: 0mm**" in text
        assert "**Fine/Detail Settings** (0mm)" in text
        assert "**Print Speed: -5 mm/s**" in text
        assert "**Slow/Precise Speed (-5 mm/s)**" in text

    def test_missing_required(self, dispatcher):
        with pytest.raises(ValidationError) as exc_info:
            dispatcher.dispatch("troubleshoot_issue", {"printerModel": "A1"})
        assert exc_info.value.message.startswith("Invalid arguments: issue")

    def test_non_object_arguments(self, dispatcher):
        with pytest.raises(ValidationError):
            dispatcher.dispatch("select_material", ["gear"])

    def test_errors_share_base(self):
        assert issubclass(UnknownOperation, AdvisorError)
        assert issubclass(ValidationError, AdvisorError)
