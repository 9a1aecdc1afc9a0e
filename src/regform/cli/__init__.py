"""regform CLI — inspect the rules and drive a form from a terminal.

Entry point registered as ``regform`` in ``pyproject.toml``::

    [project.scripts]
    regform = "regform.cli:main"
"""

import argparse
import sys

from regform.config import LOG_LEVELS, FormConfig


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``regform`` command."""
    defaults = FormConfig()
    parser = argparse.ArgumentParser(
        prog="regform",
        description="regform — registration form validation and submission.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=defaults.log_level,
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit log lines as JSON objects",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- regform rules ----------------------------------------------------
    subparsers.add_parser("rules", help="List each field and its error message")

    # -- regform submit ---------------------------------------------------
    submit_parser = subparsers.add_parser("submit", help="Validate and emit one submission")
    submit_parser.add_argument("--name", default="", help="Full name")
    submit_parser.add_argument("--email", default="", help="Email address")
    submit_parser.add_argument(
        "--agree-terms",
        action="store_true",
        help="Tick the terms checkbox",
    )
    submit_parser.add_argument(
        "--gender",
        default="",
        choices=defaults.gender_choices,
        help="Selected gender",
    )

    # -- regform shell ----------------------------------------------------
    subparsers.add_parser("shell", help="Edit fields and submit interactively")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from regform.cli._logging import configure_logging

    config = FormConfig(
        log_level=args.log_level,
        log_format="json" if args.log_json else "text",
    )
    configure_logging(config)

    if args.command == "rules":
        from regform.cli._submit import print_rules

        print_rules()
    elif args.command == "submit":
        from regform.cli._submit import run_submit

        run_submit(args, config)
    elif args.command == "shell":
        from regform.cli._shell import run_shell

        run_shell(config)
