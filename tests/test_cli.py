"""
CLI 테스트
"""
import json

from bambu_advisor.cli import main


class TestCli:
    def test_tools(self, capsys):
        assert main(["tools"]) == 0
        tools = json.loads(capsys.readouterr().out)
        assert len(tools) == 5

    def test_format(self, capsys):
        """포맷 이름 대소문자 무관"""
        assert main(["format", "stl"]) == 0
        assert "**STL (STereoLithography) File Format**" in capsys.readouterr().out

    def test_settings(self, capsys):
        assert main(["settings", "--material", "pla", "--layer-height", "0.2", "--speed", "60"]) == 0
        out = capsys.readouterr().out
        assert "**Material: PLA**" in out
        assert "**Layer Height: 0.2mm**" in out
        assert "**Print Speed: 60 mm/s**" in out

    def test_troubleshoot(self, capsys):
        assert main(["troubleshoot", "nozzle clog", "--printer", "P1P"]) == 0
        out = capsys.readouterr().out
        assert "**Printer Model: P1P**" in out
        assert "**Clogging / Under-Extrusion Issues**" in out

    def test_call(self, capsys):
        assert main(["call", "select_material", "--args", '{"partType": "gear"}']) == 0
        assert "**Material Selection Guide**" in capsys.readouterr().out

    def test_unknown_tool(self, capsys):
        assert main(["call", "nope"]) == 1
        assert "Unknown tool: nope" in capsys.readouterr().err

    def test_invalid_arguments(self, capsys):
        assert main(["settings", "--infill", "120"]) == 1
        assert "Invalid arguments" in capsys.readouterr().err

    def test_invalid_json(self, capsys):
        assert main(["call", "select_material", "--args", "{not json"]) == 1
        assert "valid JSON" in capsys.readouterr().err

    def test_no_command(self, capsys):
        assert main([]) == 1
