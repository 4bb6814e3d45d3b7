"""Command line entry point: `supremepower <command> ...`."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from supremepower.agents import ActivationService
from supremepower.config import settings
from supremepower.detection import detect_complexity
from supremepower.errors import SupremePowerError
from supremepower.skills import render_skill_list

logger = logging.getLogger(__name__)


def _print_json(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _read_skill_arg(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if value == "-":
        return sys.stdin.read()
    return Path(value).read_text(encoding="utf-8", errors="replace")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="supremepower", description="Skill-driven agent orchestration.")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("analyze", help="Score agents for a skill file and a message.")
    p.add_argument("skill_file", help="Path to the skill markdown ('-' for stdin).")
    p.add_argument("message")

    p = sub.add_parser("activate", help="Activate agents for a message.")
    p.add_argument("message")
    p.add_argument("--skill", dest="skill_id", default=None, help="Installed skill id.")
    p.add_argument("--skill-file", default=None, help="Skill markdown file instead of an installed skill.")
    p.add_argument("--force", action="append", default=[], metavar="AGENT", help="Activate this agent (repeatable).")
    p.add_argument("--personas", action="store_true", help="Print persona markdown instead of JSON.")

    p = sub.add_parser("list-skills", help="List built-in and custom skills.")
    p.add_argument("--json", action="store_true")

    p = sub.add_parser("persona", help="Print an agent definition.")
    p.add_argument("name")

    p = sub.add_parser("scaffold", help="Draft a new agent from a purpose.")
    p.add_argument("purpose")
    p.add_argument("--save", action="store_true", help="Write the draft into the custom agents folder.")

    p = sub.add_parser("complexity", help="Rate the complexity of a message.")
    p.add_argument("message")
    p.add_argument("--threshold", type=int, default=None)

    sub.add_parser("serve", help="Run the HTTP API.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.command == "serve":
        from supremepower.server.main import run

        run()
        return 0

    if args.command == "complexity":
        threshold = args.threshold if args.threshold is not None else settings.complexity_threshold
        _print_json(detect_complexity(args.message, threshold=threshold).to_dict())
        return 0

    service = ActivationService.from_settings(settings)
    try:
        if args.command == "analyze":
            _print_json(service.analyze(_read_skill_arg(args.skill_file), args.message).to_dict())
        elif args.command == "activate":
            report = service.activate(
                args.message,
                force_agents=args.force,
                skill_id=args.skill_id,
                skill_content=_read_skill_arg(args.skill_file),
            )
            if args.personas:
                print(report.personas_text)
            else:
                _print_json(report.to_dict())
        elif args.command == "list-skills":
            skills = service.skills.list_skills()
            if args.json:
                _print_json([s.to_dict() for s in skills])
            else:
                print(render_skill_list(skills))
        elif args.command == "persona":
            print(service.catalog.read_persona(args.name))
        elif args.command == "scaffold":
            _print_json(service.scaffold(args.purpose, save=True if args.save else None).to_dict())
    except (SupremePowerError, ValueError, OSError) as e:
        print(str(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
