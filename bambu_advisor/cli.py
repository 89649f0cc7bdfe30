"""
Bambu Studio Advisor CLI

사용법:
    python -m bambu_advisor.cli tools
    python -m bambu_advisor.cli settings --material PETG --layer-height 0.2
    python -m bambu_advisor.cli troubleshoot "first layer not sticking" --printer A1
    python -m bambu_advisor.cli call select_material --args '{"partType": "gear"}'

에러는 stderr 출력 후 종료 코드 1
"""
import sys
import argparse
import json
import logging

from .config import get_config
from .dispatcher import get_dispatcher
from .errors import AdvisorError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bambu Studio Advisor CLI")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("tools", help="List available tools (JSON)")

    format_parser = subparsers.add_parser("format", help="File format information")
    format_parser.add_argument("format", help="STL, 3MF, GCODE, OBJ, STEP")

    threemf_parser = subparsers.add_parser("3mf", help="3MF project file information")
    threemf_parser.add_argument("aspect", help="structure, compatibility, metadata, all")

    settings_parser = subparsers.add_parser("settings", help="Print settings recommendations")
    settings_parser.add_argument("--material", "-m", help="Material type (PLA, PETG, ABS, TPU)", default=None)
    settings_parser.add_argument("--layer-height", "-l", type=float, help="Layer height in mm", default=None)
    settings_parser.add_argument("--infill", "-i", type=float, help="Infill percentage (0-100)", default=None)
    settings_parser.add_argument("--speed", "-s", type=float, help="Print speed in mm/s", default=None)

    trouble_parser = subparsers.add_parser("troubleshoot", help="Troubleshoot a printing issue")
    trouble_parser.add_argument("issue", help="Issue description")
    trouble_parser.add_argument("--printer", "-p", help="Bambu Lab printer model (X1, P1P, A1)", default=None)

    material_parser = subparsers.add_parser("material", help="Material selection guide")
    material_parser.add_argument("part_type", help="Type of part being printed")
    material_parser.add_argument("--requirements", "-r", help="Specific requirements", default=None)

    call_parser = subparsers.add_parser("call", help="Call a tool by name with JSON arguments")
    call_parser.add_argument("tool", help="Tool name (e.g. troubleshoot_issue)")
    call_parser.add_argument("--args", "-a", help="Tool arguments as JSON object", default="{}")

    return parser


def _drop_none(values: dict) -> dict:
    return {k: v for k, v in values.items() if v is not None}


def main(argv=None) -> int:
    logging.basicConfig(stream=sys.stderr, level=get_config().log_level)

    parser = _build_parser()
    args = parser.parse_args(argv)
    dispatcher = get_dispatcher()

    if args.command is None:
        parser.print_help(sys.stderr)
        return 1

    if args.command == "tools":
        tools = [t.model_dump(by_alias=True) for t in dispatcher.list_tools()]
        print(json.dumps(tools, indent=2, ensure_ascii=False))
        return 0

    if args.command == "format":
        tool_name, arguments = "get_file_format_info", {"format": args.format.upper()}
    elif args.command == "3mf":
        tool_name, arguments = "get_3mf_info", {"aspect": args.aspect.lower()}
    elif args.command == "settings":
        tool_name = "recommend_print_settings"
        arguments = _drop_none({
            "material": args.material,
            "layerHeight": args.layer_height,
            "infill": args.infill,
            "printSpeed": args.speed,
        })
    elif args.command == "troubleshoot":
        tool_name = "troubleshoot_issue"
        arguments = _drop_none({"issue": args.issue, "printerModel": args.printer})
    elif args.command == "material":
        tool_name = "select_material"
        arguments = _drop_none({"partType": args.part_type, "requirements": args.requirements})
    else:
        tool_name = args.tool
        try:
            arguments = json.loads(args.args)
        except json.JSONDecodeError as e:
            print(f"Error: --args must be valid JSON ({e})", file=sys.stderr)
            return 1

    try:
        print(dispatcher.dispatch(tool_name, arguments))
    except AdvisorError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
