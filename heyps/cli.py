import argparse
import logging
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from heyps.container import container
from heyps.entities.application import AppAbbr, VersionSelector, display_name
from heyps.entities.script import ScriptFile
from heyps.exceptions import BaseAppError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="heyps",
        description="Executes an Adobe script in the target application.",
    )
    parser.add_argument(
        "-a",
        "--app",
        required=True,
        metavar="APP",
        help="The target Adobe application: ps, ai or ae",
    )
    parser.add_argument(
        "-t",
        "--target",
        default=None,
        metavar="TARGET",
        help="The target version: latest, beta or a release year such as 2024 "
        "(default: HEYPS_DEFAULT_TARGET or latest)",
    )
    parser.add_argument(
        "-e",
        "--execute",
        metavar="FILE_PATH",
        help="The script file to execute (.psjs, .jsx or .js)",
    )
    parser.add_argument(
        "-l",
        "--list",
        action="store_true",
        help="List the installed versions of the application and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Echo the output of the commands run",
    )
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _print_installations(console: Console, abbr: AppAbbr, selector: VersionSelector) -> int:
    found = container.get_list_installations_use_case().execute(abbr, selector)
    if not found.paths:
        console.print(f"No installation of Adobe {abbr.base_name} found")
        return 1
    table = Table(title=f"Adobe {abbr.base_name} ({abbr.bundle_id})")
    table.add_column(str(selector), justify="center")
    table.add_column("Name", no_wrap=True)
    table.add_column("Path", overflow="fold")
    for path in found.paths:
        mark = "*" if path == found.selected else ""
        table.add_row(mark, escape(display_name(path)), escape(path))
    console.print(table)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.list and not args.execute:
        parser.error("the following arguments are required: -e/--execute")

    out = Console()
    err = Console(stderr=True, soft_wrap=True)
    try:
        abbr = AppAbbr.parse(args.app)
        settings = container.get_settings()
        _configure_logging("INFO" if args.verbose else settings.log_level)

        if args.target:
            selector = VersionSelector.parse(args.target)
        else:
            selector = settings.default_selector()
        if args.list:
            return _print_installations(out, abbr, selector)

        script = ScriptFile.locate(args.execute, str(settings.scripts_dir))
        app = container.get_run_script_use_case().execute(
            abbr, selector, script, verbose=args.verbose
        )
        if args.verbose:
            err.print(escape(f"Ran {script.name} in {app.name}"))
    except BaseAppError as e:
        err.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
