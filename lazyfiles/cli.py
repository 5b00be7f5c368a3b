"""Command-line front door for lazyfiles.

Parses CLI options, picks the starting directory, and either renders one view
and exits (``--render``) or runs the interactive shell.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .errors import NoAccessibleRootError
from .file_model.fs import stat_entry
from .preview.highlight import available_style_names, normalize_style
from .render import render_session
from .runtime import run_shell
from .runtime.config import load_log_level, load_root_candidates, load_style_name
from .runtime.loader import BackgroundLoader
from .runtime.session import BrowserSession


def _configure_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level = load_log_level() or logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def render_path_view(path: Path, style: str, color: bool) -> str:
    """Render the listing of a directory, or the preview of a file."""
    session = BrowserSession()
    target = path.absolute()
    if target.is_dir():
        session.initialize([target])
    else:
        session.initialize([target.parent])
        session.open(stat_entry(target))
    return render_session(session, style=style, color=color)


def main(default_paths: list[Path] | None = None) -> None:
    """Parse CLI arguments and launch lazyfiles.

    Positional paths are root candidates tried in order. ``default_paths`` is
    primarily for tests; when omitted, candidates come from config.
    """
    parser = argparse.ArgumentParser(
        description="Browse directories and preview text and image files in the terminal."
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Starting directory candidates, tried in order. Defaults to config or home directory.",
    )
    parser.add_argument(
        "--style",
        default=None,
        help=f"Pygments style name ({', '.join(available_style_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--render", metavar="PATH", help="Render listing or preview for PATH and exit.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    args = parser.parse_args()

    _configure_logging(args.verbose)
    style = normalize_style(args.style or load_style_name())
    color = not args.no_color and sys.stdout.isatty()

    if args.render is not None:
        if args.paths:
            raise SystemExit("Cannot combine positional paths with --render.")
        render_path = Path(args.render)
        if not render_path.exists():
            raise SystemExit(f"Path not found: {render_path}")
        try:
            rendered = render_path_view(render_path, style, color)
        except NoAccessibleRootError as exc:
            raise SystemExit(str(exc)) from exc
        sys.stdout.write(rendered)
        return

    candidates = args.paths or default_paths or load_root_candidates()
    session = BrowserSession(loader=BackgroundLoader())
    try:
        session.initialize(candidates)
    except NoAccessibleRootError as exc:
        raise SystemExit(str(exc)) from exc

    try:
        run_shell(session, sys.stdin, sys.stdout, style, color=color)
    except KeyboardInterrupt:
        sys.stdout.write("\n")


if __name__ == "__main__":
    main()
