"""
HTTP API 테스트
"""
import pytest
from fastapi.testclient import TestClient

from bambu_advisor.dispatcher import get_dispatcher
from main import app


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["data"]["service"] == "alive"


class TestToolsEndpoint:
    """GET /api/v1/advisor/tools"""

    def test_list_tools(self, client):
        response = client.get("/api/v1/advisor/tools")
        assert response.status_code == 200
        tools = response.json()["tools"]
        assert len(tools) == 5
        assert all("inputSchema" in tool for tool in tools)


class TestCallToolEndpoint:
    """POST /api/v1/advisor/tools/{tool_name}"""

    def test_call_tool(self, client):
        response = client.post(
            "/api/v1/advisor/tools/troubleshoot_issue",
            json={"issue": "layer shift", "printerModel": "A1"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["data"]["tool"] == "troubleshoot_issue"
        expected = get_dispatcher().dispatch(
            "troubleshoot_issue", {"issue": "layer shift", "printerModel": "A1"}
        )
        assert body["data"]["text"] == expected

    def test_call_without_body(self, client):
        """인자가 모두 선택인 도구는 본문 없이 호출 가능"""
        response = client.post("/api/v1/advisor/tools/recommend_print_settings")
        assert response.status_code == 200
        assert "**General Bambu Studio Tips**" in response.json()["data"]["text"]

    def test_unknown_tool(self, client):
        response = client.post("/api/v1/advisor/tools/slice_model", json={})
        assert response.status_code == 404
        assert response.json() == {"status": "error", "error": "Unknown tool: slice_model"}

    def test_invalid_arguments(self, client):
        response = client.post(
            "/api/v1/advisor/tools/recommend_print_settings",
            json={"infill": 101},
        )
        assert response.status_code == 422
        body = response.json()
        assert body["status"] == "error"
        assert body["error"].startswith("Invalid arguments: infill")
