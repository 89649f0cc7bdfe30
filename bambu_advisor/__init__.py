"""
Bambu Studio Advisor

3D 프린팅 워크플로우(파일 포맷, 3MF, 출력 설정, 문제 진단, 재료 선택) 질의에
룰 매칭 + 고정 안내 문구 조합으로 답변합니다.

사용법:
    from bambu_advisor import get_dispatcher

    text = get_dispatcher().dispatch("troubleshoot_issue", {"issue": "stringing"})
"""
from .advisor import (
    get_3mf_info,
    get_file_format_info,
    recommend_print_settings,
    select_material,
    troubleshoot_issue,
)
from .dispatcher import ToolDispatcher, get_dispatcher
from .errors import AdvisorError, ContentStoreError, UnknownOperation, ValidationError
from .tools import ToolDefinition, list_tool_definitions

__all__ = [
    'get_3mf_info',
    'get_file_format_info',
    'recommend_print_settings',
    'select_material',
    'troubleshoot_issue',
    'ToolDispatcher',
    'get_dispatcher',
    'AdvisorError',
    'ContentStoreError',
    'UnknownOperation',
    'ValidationError',
    'ToolDefinition',
    'list_tool_definitions',
]
