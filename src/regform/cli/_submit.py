"""``regform rules`` and ``regform submit``.

``submit`` writes the emitted record as a JSON line to stdout and each
error as ``field: message`` to stderr. Exits with code 1 when rejected.
"""

import argparse
import sys
from typing import TextIO

from regform.config import FormConfig
from regform.form import RegistrationForm
from regform.sinks import StreamSink
from regform.validation import MESSAGES


def print_rules() -> None:
    width = max(len(f) for f in MESSAGES)
    for field, message in MESSAGES.items():
        print(f"{field:<{width}}  {message}")


def print_errors(form: RegistrationForm, stream: TextIO | None = None) -> None:
    stream = stream or sys.stderr
    for field, message in form.errors.items():
        print(f"{field}: {message}", file=stream)


def run_submit(args: argparse.Namespace, config: FormConfig) -> None:
    """Fill a form from *args*, submit it once, report the outcome."""
    form = RegistrationForm(sink=StreamSink(sys.stdout), config=config)
    form.set_name(args.name)
    form.set_email(args.email)
    form.set_agree_terms(args.agree_terms)
    form.select_gender(args.gender)

    outcome = form.submit()
    if not outcome.ok:
        print_errors(form)
        raise SystemExit(1)
