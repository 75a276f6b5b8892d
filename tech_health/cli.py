"""
Command-line entry point for the Tech Health assessment.

Usage:
    tech-health score team.json                  # print the markdown report
    tech-health score team.json --json           # print results as JSON
    tech-health score team.json --output out.json
    tech-health export team.json --out-dir exports/
    tech-health validate team.json               # exit 1 if the file is rejected
    tech-health framework --area tech-debt
"""

import argparse
import logging
import sys
from typing import List, Optional

from tech_health.config import get_settings
from tech_health.core.dependencies import get_assessment_scorer, get_framework
from tech_health.core.exceptions import ImportValidationException, TechHealthError
from tech_health.logging_config import configure_logging
from tech_health.services.completion import completion_percentage, is_complete
from tech_health.services.export_service import build_export, save_export, write_export
from tech_health.services.import_service import load_import_file
from tech_health.services.report_generator import generate_assessment_report

logger = logging.getLogger(__name__)


def cmd_score(args: argparse.Namespace) -> int:
    settings = get_settings()
    imported = load_import_file(args.file, framework=get_framework())
    results = get_assessment_scorer().score(imported.response)

    if args.json:
        print(results.model_dump_json(by_alias=True, indent=settings.EXPORT_INDENT))
    else:
        print(generate_assessment_report(
            imported.response,
            results,
            framework=get_framework(),
            bar_width=settings.REPORT_BAR_WIDTH,
        ))

    if args.output:
        document = build_export(imported.response, results)
        save_export(document, args.output, indent=settings.EXPORT_INDENT)
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    settings = get_settings()
    imported = load_import_file(args.file, framework=get_framework())

    if imported.is_draft:
        document = build_export(imported.response)
    else:
        document = build_export(
            imported.response, get_assessment_scorer().score(imported.response)
        )

    path = write_export(
        document,
        out_dir=args.out_dir or settings.EXPORT_DIR,
        indent=settings.EXPORT_INDENT,
    )
    print(path)
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    framework = get_framework()
    imported = load_import_file(args.file, framework=framework)
    response = imported.response

    print(f"Team:       {response.team_info.team_name}")
    print(f"Status:     {'draft' if imported.is_draft else 'completed'}")
    print(f"Completion: {completion_percentage(response, framework)}%")
    print(f"Complete:   {'yes' if is_complete(response, framework) else 'no'}")
    return 0


def cmd_framework(args: argparse.Namespace) -> int:
    framework = get_framework()
    areas = framework.areas
    if args.area:
        area = framework.get_area(args.area)
        if area is None:
            raise TechHealthError(f"Unknown area: {args.area}")
        areas = (area,)

    for area in areas:
        print(f"{area.emoji} {area.title} [{area.id}]".strip())
        for sub_axis in area.sub_axes:
            print(f"  - {sub_axis.title} [{sub_axis.id}]")
            if args.area:
                for level in sub_axis.levels:
                    print(f"      {level.level}. {level.label}: {level.description}")

    if not args.area:
        print("")
        print("Pulse survey:")
        for question in framework.pulse_survey:
            print(f"  - {question.question} [{question.id}, {question.kind.value}]")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tech-health",
        description="Score and manage Tech Health self-assessments",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("score", help="Score an exported assessment")
    p.add_argument("file", help="Exported assessment JSON")
    p.add_argument("--json", action="store_true", help="Print results as JSON")
    p.add_argument("--output", help="Also write a completed export to this path")
    p.set_defaults(func=cmd_score)

    p = sub.add_parser("export", help="Re-export under the canonical file name")
    p.add_argument("file", help="Exported assessment JSON")
    p.add_argument("--out-dir", help="Target directory (default: EXPORT_DIR)")
    p.set_defaults(func=cmd_export)

    p = sub.add_parser("validate", help="Check an exported assessment")
    p.add_argument("file", help="Exported assessment JSON")
    p.set_defaults(func=cmd_validate)

    p = sub.add_parser("framework", help="Print the assessment framework")
    p.add_argument("--area", help="Show one area with level descriptions")
    p.set_defaults(func=cmd_framework)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    configure_logging(settings.effective_log_level, settings.LOG_FORMAT)

    try:
        return args.func(args)
    except TechHealthError as e:
        logger.error("command_failed", extra={"command": args.command, "error": str(e)})
        print(f"error: {e}", file=sys.stderr)
        if isinstance(e, ImportValidationException):
            for err in e.details.get("errors", []):
                print(f"  {err['field']}: {err['message']}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
