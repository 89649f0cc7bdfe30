"""
도구 분배기 - 도구 이름에 따라 파이프라인 호출

1. 도구 이름 정확히 일치하는 등록 정보 조회 (없으면 UnknownOperation)
2. 요청 모델로 인자 검증 (실패 시 ValidationError, 엔진 미실행)
3. 파이프라인 실행 → 문서 반환
"""
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from .errors import UnknownOperation, ValidationError
from .kb import ContentStore
from .tools import TOOL_SPECS, ToolDefinition, ToolSpec

logger = logging.getLogger(__name__)


class ToolDispatcher:
    """
    도구 이름 → 분류기+조합기 파이프라인 라우팅

    상태 없음 - 요청 간 공유되는 것은 읽기 전용 저장소/룰 테이블뿐
    """

    def __init__(self, store: Optional[ContentStore] = None, specs: Optional[List[ToolSpec]] = None):
        self.store = store
        self._specs: Dict[str, ToolSpec] = {spec.name: spec for spec in (specs or TOOL_SPECS)}

    @property
    def tool_names(self) -> List[str]:
        return list(self._specs.keys())

    def list_tools(self) -> List[ToolDefinition]:
        return [spec.definition() for spec in self._specs.values()]

    def dispatch(self, tool_name: str, arguments: Optional[Any] = None) -> str:
        """
        도구 실행

        Args:
            tool_name: 도구 이름 (예: troubleshoot_issue)
            arguments: 도구 인자 (JSON 객체)

        Returns:
            str: 마크다운 문서

        Raises:
            UnknownOperation: 등록되지 않은 도구
            ValidationError: 인자 검증 실패
        """
        spec = self._specs.get(tool_name)
        if spec is None:
            logger.warning(f"Unknown tool requested: {tool_name}")
            raise UnknownOperation(tool_name)

        try:
            request = spec.request_model.model_validate(arguments if arguments is not None else {})
        except PydanticValidationError as e:
            error = ValidationError.from_pydantic(tool_name, e)
            logger.warning(f"[{tool_name}] {error.message}")
            raise error from e

        logger.info(f"Dispatching tool: {tool_name}")
        return spec.handler(request, self.store)


_dispatcher_instance: Optional[ToolDispatcher] = None


def get_dispatcher() -> ToolDispatcher:
    """싱글톤 분배기 인스턴스 반환"""
    global _dispatcher_instance
    if _dispatcher_instance is None:
        _dispatcher_instance = ToolDispatcher()
    return _dispatcher_instance
