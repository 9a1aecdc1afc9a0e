"""``regform shell`` — a line-oriented host for one form.

Commands, one per line::

    set <field> <value>       name, email, agreeTerms, gender
    toggle agreeTerms
    select gender <value>
    show                      print the current values
    submit                    emit the record and list errors
    quit

Reads until ``quit`` or end of input.
"""

import json
import logging
import shlex
import sys
from typing import TextIO

from regform.cli._submit import print_errors
from regform.config import FormConfig
from regform.errors import UnknownFieldError
from regform.form import RegistrationForm
from regform.sinks import StreamSink

logger = logging.getLogger("regform.cli")

_TRUE_VALUES = ("true", "1", "yes", "on")

HELP = """\
    set <field> <value>       name, email, agreeTerms, gender
    toggle agreeTerms
    select gender <value>
    show                      print the current values
    submit                    emit the record and list errors
    quit
"""


def _coerce(field: str, raw: str) -> str | bool:
    if field == "agreeTerms":
        return raw.lower() in _TRUE_VALUES
    return raw


def _check_gender(form: RegistrationForm, value: str, err: TextIO) -> bool:
    choices = form.config.gender_choices
    if value and value not in choices:
        print(f"Error: gender must be one of {', '.join(choices)}, got {value!r}", file=err)
        return False
    return True


def execute(
    form: RegistrationForm,
    line: str,
    out: TextIO,
    err: TextIO | None = None,
) -> bool:
    """Run one shell command. Returns False when the shell should stop."""
    err = err or sys.stderr
    try:
        words = shlex.split(line)
    except ValueError as exc:
        print(f"Error: {exc}", file=err)
        return True
    if not words:
        return True

    command, rest = words[0], words[1:]
    match command, rest:
        case ("quit" | "exit"), []:
            return False
        case "help", []:
            out.write(HELP)
        case "set", ["gender", *value]:
            if _check_gender(form, " ".join(value), err):
                form.select_gender(" ".join(value))
        case "set", [field, *value]:
            try:
                form.set(field, _coerce(field, " ".join(value)))
            except UnknownFieldError as exc:
                print(f"Error: {exc}", file=err)
        case "toggle", ["agreeTerms"]:
            form.toggle_agree_terms()
        case "select", ["gender", value]:
            if _check_gender(form, value, err):
                form.select_gender(value)
        case "show", []:
            out.write(json.dumps(form.values.as_record()) + "\n")
        case "submit", []:
            form.submit()
            print_errors(form, err)
        case _:
            logger.debug("unrecognized shell input: %r", line)
            print(f"Error: unrecognized command {line.strip()!r} (try 'help')", file=err)
    return True


def run_shell(
    config: FormConfig,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> None:
    """Read commands from *stdin* until ``quit`` or EOF."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    form = RegistrationForm(sink=StreamSink(stdout), config=config)
    choices = "/".join(config.gender_choices)
    stdout.write(f"regform shell: fields name, email, agreeTerms, gender ({choices}). 'help' for commands.\n")
    for line in stdin:
        if not execute(form, line, stdout, stderr):
            break
