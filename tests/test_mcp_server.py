"""
MCP 서버 핸들러 테스트 (stdio 연결 없이 핸들러만 검증)
"""
import pytest

from bambu_advisor.dispatcher import get_dispatcher
from bambu_advisor.errors import UnknownOperation, ValidationError
from mcp_server import build_tools, handle_call_tool


class TestListTools:
    def test_build_tools(self):
        tools = build_tools()
        assert [t.name for t in tools] == get_dispatcher().tool_names
        for tool in tools:
            assert tool.inputSchema["type"] == "object"
            assert tool.description


class TestCallTool:
    """도구 실행 → TextContent"""

    @pytest.mark.asyncio
    async def test_single_text_item(self):
        arguments = {"partType": "drone frame", "requirements": "strong and light"}
        content = await handle_call_tool("select_material", arguments)
        assert len(content) == 1
        assert content[0].type == "text"
        assert content[0].text == get_dispatcher().dispatch("select_material", arguments)

    @pytest.mark.asyncio
    async def test_none_arguments(self):
        content = await handle_call_tool("recommend_print_settings", None)
        assert content[0].text.startswith("**Print Settings Recommendations for Bambu Studio**")

    @pytest.mark.asyncio
    async def test_unknown_tool_propagates(self):
        with pytest.raises(UnknownOperation):
            await handle_call_tool("unknown_tool", {})

    @pytest.mark.asyncio
    async def test_invalid_arguments_propagate(self):
        with pytest.raises(ValidationError):
            await handle_call_tool("get_3mf_info", {"aspect": "geometry"})


class TestServerRegistration:
    """stdio 서버에 도구 핸들러 등록 여부"""

    def test_handlers_registered(self):
        from mcp.types import CallToolRequest, ListToolsRequest
        from mcp_server import app

        assert ListToolsRequest in app.request_handlers
        assert CallToolRequest in app.request_handlers
