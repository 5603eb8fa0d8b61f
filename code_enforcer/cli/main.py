import argparse
import logging
import sys

from code_enforcer._version import __version__
from code_enforcer.cli import run
from code_enforcer.cli.exitcodes import EXIT_ENGINE_ERROR
from code_enforcer.core.config import DEFAULT_CONFIG_FILE


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="code-enforcer",
        description="code-enforcer: source compliance checks for JavaScript projects",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--config-file", default=DEFAULT_CONFIG_FILE, help="Config file name (default: .code-enforcer.json).")
    p.add_argument("--solutions", action="store_true", help="Show solutions to problems.")
    p.add_argument("--format", choices=["text", "json"], default="text", help="Output format.")
    p.add_argument("--root", default=".", help="Project root (default: .)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr.")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        return run.run(
            config_file=args.config_file,
            root=args.root,
            solutions=args.solutions,
            fmt=args.format,
        )
    except Exception as e:
        print(f"code-enforcer: error: {e}", file=sys.stderr)
        return EXIT_ENGINE_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
