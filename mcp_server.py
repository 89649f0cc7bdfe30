#!/usr/bin/env python3
"""
Bambu Studio Advisor MCP Server

도구 5종을 MCP(stdio)로 노출합니다.
stdout은 프로토콜 전용 - 로그는 stderr로만 출력.

Usage: python mcp_server.py
"""
import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from bambu_advisor.config import get_config
from bambu_advisor.dispatcher import ToolDispatcher, get_dispatcher

config = get_config()

logging.basicConfig(
    stream=sys.stderr,
    level=config.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = Server(config.server_name)


def build_tools(dispatcher: Optional[ToolDispatcher] = None) -> List[Tool]:
    """도구 정의 → MCP Tool 목록"""
    dispatcher = dispatcher or get_dispatcher()
    return [
        Tool(name=d.name, description=d.description, inputSchema=d.input_schema)
        for d in dispatcher.list_tools()
    ]


async def handle_call_tool(
    name: str,
    arguments: Optional[Dict[str, Any]],
    dispatcher: Optional[ToolDispatcher] = None,
) -> List[TextContent]:
    """
    도구 실행 → 텍스트 콘텐츠 1개

    UnknownOperation / ValidationError는 그대로 전파 (MCP 라이브러리가 에러 응답으로 변환)
    """
    dispatcher = dispatcher or get_dispatcher()
    text = dispatcher.dispatch(name, arguments or {})
    return [TextContent(type="text", text=text)]


@app.list_tools()
async def list_tools() -> List[Tool]:
    return build_tools()


@app.call_tool()
async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
    return await handle_call_tool(name, arguments)


async def main():
    """Run the MCP server"""
    logger.info(f"{config.server_name} {config.server_version} running on stdio")
    async with stdio_server() as (read_stream, write_stream):
        await app.run(read_stream, write_stream, app.create_initialization_options())


if __name__ == "__main__":
    asyncio.run(main())
