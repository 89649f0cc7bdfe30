"""
도구 카탈로그

도구 이름 → (설명, 요청 모델, 파이프라인)
입력 JSON 스키마는 요청 모델에서 생성 (camelCase 필드명)
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type

from pydantic import BaseModel, Field

from . import advisor
from .kb import ContentStore
from .models import (
    FileFormatRequest,
    MaterialSelectionRequest,
    PrintSettingsRequest,
    ThreeMFInfoRequest,
    ToolRequest,
    TroubleshootRequest,
)


class ToolDefinition(BaseModel):
    """외부 공개용 도구 정의"""
    name: str
    description: str
    input_schema: Dict[str, Any] = Field(..., serialization_alias="inputSchema")


@dataclass(frozen=True)
class ToolSpec:
    """도구 등록 정보"""
    name: str
    description: str
    request_model: Type[ToolRequest]
    handler: Callable[[Any, Optional[ContentStore]], str]

    def input_schema(self) -> Dict[str, Any]:
        return self.request_model.model_json_schema(by_alias=True)

    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=self.name,
            description=self.description,
            input_schema=self.input_schema(),
        )


TOOL_SPECS: List[ToolSpec] = [
    ToolSpec(
        name="get_file_format_info",
        description=(
            "Get detailed information about 3D printing file formats (STL, 3MF, G-code, OBJ, STEP) "
            "including their purposes, capabilities, and when to use them in Bambu Studio."
        ),
        request_model=FileFormatRequest,
        handler=advisor.get_file_format_info,
    ),
    ToolSpec(
        name="get_3mf_info",
        description=(
            "Get comprehensive information about 3MF files in Bambu Studio, including structure, "
            "compatibility, metadata handling, and best practices."
        ),
        request_model=ThreeMFInfoRequest,
        handler=advisor.get_3mf_info,
    ),
    ToolSpec(
        name="recommend_print_settings",
        description=(
            "Get recommendations for optimal print settings in Bambu Studio based on material type, "
            "desired quality, and print requirements."
        ),
        request_model=PrintSettingsRequest,
        handler=advisor.recommend_print_settings,
    ),
    ToolSpec(
        name="troubleshoot_issue",
        description=(
            "Get troubleshooting guidance for common Bambu Studio and 3D printing issues, including "
            "print failures, quality problems, and software issues."
        ),
        request_model=TroubleshootRequest,
        handler=advisor.troubleshoot_issue,
    ),
    ToolSpec(
        name="select_material",
        description=(
            "Get recommendations for selecting the right material for a 3D printing project based on "
            "part requirements and use case."
        ),
        request_model=MaterialSelectionRequest,
        handler=advisor.select_material,
    ),
]


def list_tool_definitions(specs: Optional[List[ToolSpec]] = None) -> List[ToolDefinition]:
    """등록된 도구 정의 목록"""
    return [spec.definition() for spec in (specs or TOOL_SPECS)]
