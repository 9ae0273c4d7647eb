"""Command-line interface for the AVS scaffolder.

Usage::

    avs-scaffold create my-avs
    avs-scaffold create price-feed --template oracle --yes
    python -m avs_scaffold create demo -t task-based -d "Demo AVS" -y
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .config import ScaffoldSettings
from .errors import ScaffoldError
from .models import DEFAULT_PROJECT_NAME, TemplateKind
from .scaffolder.generator import ScaffoldOrchestrator
from .utils import print_error, print_info, print_success, print_summary_table


def build_parser() -> argparse.ArgumentParser:
    """Build the ``avs-scaffold`` argument parser."""
    parser = argparse.ArgumentParser(
        prog="avs-scaffold",
        description="CLI tool to scaffold new AVS projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  avs-scaffold create\n"
            "  avs-scaffold create my-avs --template oracle\n"
            "  avs-scaffold create demo -d \"Demo AVS\" --yes\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("create", help="Create a new AVS project")
    create.add_argument(
        "project_name",
        nargs="?",
        default=DEFAULT_PROJECT_NAME,
        metavar="project-name",
        help=f"Name of the project (default: {DEFAULT_PROJECT_NAME})",
    )
    create.add_argument(
        "--template", "-t",
        choices=[kind.value for kind in TemplateKind],
        default=TemplateKind.TASK_BASED.value,
        help="Template type (default: task-based)",
    )
    create.add_argument(
        "--description", "-d",
        default=None,
        help="Project description (default: An EigenLayer AVS project)",
    )
    create.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Accept defaults without prompting",
    )
    create.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="Directory in which to create the project (default: current directory)",
    )
    create.add_argument(
        "--resources-dir",
        type=Path,
        default=None,
        help="Alternative location of bundled templates and contracts",
    )
    return parser


def _settings_from_args(args: argparse.Namespace) -> ScaffoldSettings:
    settings = ScaffoldSettings.from_env()
    updates: dict[str, object] = {}
    if args.base_dir is not None:
        updates["base_dir"] = args.base_dir
    if args.resources_dir is not None:
        updates["resources_dir"] = args.resources_dir
    if args.yes:
        updates["interactive"] = False
    if args.description is not None:
        updates["default_description"] = args.description
    return settings.model_copy(update=updates)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for ``avs-scaffold`` and ``python -m avs_scaffold``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = _settings_from_args(args)
    orchestrator = ScaffoldOrchestrator(settings)

    print_info("Creating new AVS project...")
    try:
        result = asyncio.run(orchestrator.generate(args.project_name, args.template))
    except ScaffoldError as exc:
        print_error(str(exc))
        sys.exit(1)
    except Exception as exc:
        print_error(str(exc) or exc.__class__.__name__)
        sys.exit(1)

    print_summary_table(
        {
            "Project": str(result.project_root),
            "Template": result.config.template.value,
            "package.json template": result.package_template_origin.value,
            "Contracts": "skipped" if result.contracts_skipped else "copied",
            "Files written": str(len(result.written)),
        },
        title="AVS Project",
    )
    print_success("Project created successfully!")


if __name__ == "__main__":
    main()
