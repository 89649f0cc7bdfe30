"""
어드바이저 API 라우터

GET  /api/v1/advisor/tools - 도구 목록 (입력 스키마 포함)
POST /api/v1/advisor/tools/{tool_name} - 도구 실행 (요청 본문 = 도구 인자)
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, HTTPException
from pydantic import BaseModel

from ..dispatcher import get_dispatcher
from ..errors import UnknownOperation, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/advisor", tags=["advisor"])


# ============================================================
# Response Models
# ============================================================
class ToolListResponse(BaseModel):
    """도구 목록 응답"""
    tools: List[Dict[str, Any]]


class ToolCallResult(BaseModel):
    """도구 실행 결과"""
    tool: str
    text: str


class ToolCallResponse(BaseModel):
    """도구 실행 응답"""
    status: str = "ok"
    data: ToolCallResult


# ============================================================
# Endpoints
# ============================================================
@router.get("/tools", response_model=ToolListResponse)
async def list_tools():
    """
    지원 도구 목록 조회

    Returns:
        도구 이름, 설명, 입력 JSON 스키마
    """
    tools = get_dispatcher().list_tools()
    return ToolListResponse(tools=[t.model_dump(by_alias=True) for t in tools])


@router.post("/tools/{tool_name}", response_model=ToolCallResponse)
def call_tool(tool_name: str, arguments: Optional[Dict[str, Any]] = Body(default=None)):
    """
    도구 실행

    Args:
        tool_name: 도구 이름 (예: troubleshoot_issue)
        arguments: 도구 인자 JSON (예: {"issue": "stringing", "printerModel": "P1S"})

    Returns:
        렌더링된 마크다운 문서
    """
    try:
        text = get_dispatcher().dispatch(tool_name, arguments)
    except UnknownOperation as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)

    return ToolCallResponse(data=ToolCallResult(tool=tool_name, text=text))
