"""Turbine command-line interface.

Usage::

    python -m turbine.cli android-example dynamic_ubo "Dynamic UBO"
    python -m turbine.cli android-manifest dynamic_ubo
    python -m turbine.cli kdxr-resource reference_space
    python -m turbine.cli list
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from turbine.config import Config
from turbine.scaffolder import GENERATORS, ScaffoldError, get_generator
from turbine.utils import print_error, print_success, print_summary_table, print_warning


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="turbine",
        description="Turbine -- scaffolding for KDGpu examples and KDXr resources",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            '  turbine android-example dynamic_ubo "Dynamic UBO"\n'
            "  turbine --root ../KDGpu kdxr-resource reference_space\n"
        ),
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Project root the generated paths are relative to (default: .)",
    )
    parser.add_argument(
        "--templates",
        default=None,
        help="Template directory (default: the bundled templates)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file (default: TURBINE_* environment variables)",
    )
    parser.add_argument(
        "--year",
        type=int,
        default=None,
        help="Copyright year written into generated files (default: current year)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")
    for command, generator_cls in GENERATORS.items():
        sub = subparsers.add_parser(command, help=generator_cls.description)
        for name, help_text, required in generator_cls.arguments:
            if required:
                sub.add_argument(name, metavar=name.upper(), help=help_text)
            else:
                sub.add_argument(name, metavar=name.upper(), nargs="?", default=None, help=help_text)

    subparsers.add_parser("list", help="List the available generators and their templates")
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Resolve configuration: file or environment, then command-line overrides."""
    config = Config.load(Path(args.config)) if args.config else Config.from_env()
    overrides: dict[str, object] = {}
    if args.root is not None:
        overrides["project_root"] = Path(args.root)
    if args.templates is not None:
        overrides["template_dir"] = Path(args.templates)
    if args.year is not None:
        overrides["year"] = args.year
    if overrides:
        config = Config.model_validate({**config.model_dump(), **overrides})
    return config


def list_generators(config: Config) -> None:
    rows = []
    for command, generator_cls in GENERATORS.items():
        generator = generator_cls(config)
        usage = " ".join(
            name.upper() if required else f"[{name.upper()}]"
            for name, _, required in generator_cls.arguments
        )
        rows.append((f"{command} {usage}", "\n".join(generator.templates())))
    print_summary_table(rows, columns=("Command", "Templates"), title="Generators")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``turbine`` / ``python -m turbine.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except (OSError, ValueError, ValidationError) as exc:
        print_error(f"Invalid configuration: {exc}")
        return 1

    if args.command == "list":
        try:
            list_generators(config)
        except ScaffoldError as exc:
            print_error(str(exc))
            return 1
        return 0

    generator_cls = get_generator(args.command)
    values = [getattr(args, name) for name, _, _ in generator_cls.arguments]

    try:
        report = generator_cls(config).run(*values)
    except ScaffoldError as exc:
        print_error(str(exc))
        return 1

    report.print_summary()
    if report.ok:
        print_success(f"{args.command} finished")
    else:
        print_warning(f"{args.command} finished with {len(report.warnings)} warning(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
