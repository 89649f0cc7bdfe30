"""
어드바이저 에러 정의

- ValidationError: 도구 인자가 스키마와 맞지 않음 (엔진 실행 전 거부)
- UnknownOperation: 등록되지 않은 도구 이름
- ContentStoreError: 콘텐츠 저장소/버킷 테이블 구성 오류 (import 시점)

카테고리 미매칭(NoMatch)은 에러가 아님 - 파이프라인에서 폴백 섹션으로 처리
"""
from typing import Any, Dict, List


class AdvisorError(Exception):
    """어드바이저 기본 에러"""
    def __init__(self, message: str, error_code: str = "advisor_error"):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class UnknownOperation(AdvisorError):
    """알 수 없는 도구 이름"""
    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}", error_code="unknown_operation")
        self.tool_name = tool_name


class ValidationError(AdvisorError):
    """도구 인자 검증 실패"""
    def __init__(self, tool_name: str, errors: List[Dict[str, str]]):
        details = ", ".join(f"{e['field']}: {e['reason']}" for e in errors)
        super().__init__(f"Invalid arguments: {details}", error_code="invalid_arguments")
        self.tool_name = tool_name
        self.errors = errors

    @classmethod
    def from_pydantic(cls, tool_name: str, exc: Any) -> "ValidationError":
        """pydantic ValidationError → 필드 경로 + 사유 목록"""
        errors = [
            {
                "field": ".".join(str(loc) for loc in err.get("loc", ())) or "(root)",
                "reason": err.get("msg", "invalid value"),
            }
            for err in exc.errors()
        ]
        return cls(tool_name, errors)


class ContentStoreError(AdvisorError):
    """콘텐츠 저장소 누락/버킷 테이블 오류"""
    def __init__(self, message: str):
        super().__init__(message, error_code="content_store_error")
