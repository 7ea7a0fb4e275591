"""
Turns the query string of GET / into an execution plan.

  name   plain string; a silly placeholder is generated when missing
  dep    standard base64 of a URL path to call on the same host (strict)
  sleep  milliseconds to hold the request, at most a day (lenient: junk is ignored)
  code   status to answer with, 200..999 (lenient: junk is ignored)
"""

import base64
import re

from sla.names import resolve_name

MIN_STATUS = 200
MAX_STATUS = 999
# one day; longer sleeps are ignored like unparsable ones
MAX_SLEEP_MS = 24 * 60 * 60 * 1000

_INT_RE = re.compile(r"[+-]?[0-9]+")


class InvalidEncoding(ValueError):
    """The dep parameter is not valid standard base64."""


class ExecutionPlan:
    def __init__(self, name, dependency_path="", sleep_ms=0, status_code=None):
        self.name = name
        self.dependency_path = dependency_path
        self.sleep_ms = sleep_ms
        # None means "no explicit status write", i.e. 200
        self.status_code = status_code

    def __repr__(self):
        return (f"ExecutionPlan(name={self.name!r}, dependency_path={self.dependency_path!r}, "
                f"sleep_ms={self.sleep_ms}, status_code={self.status_code})")


def parse_int(value):
    if value is None or not _INT_RE.fullmatch(value):
        return None
    return int(value)


def decode_dependency(value):
    if not value:
        return ""
    try:
        raw = base64.b64decode(value, validate=True)
        return raw.decode("utf-8")
    except ValueError as e:
        raise InvalidEncoding(f"illegal base64 data in dep {value!r}: {e}") from e


def interpret(args):
    # dep is decoded before anything else so a bad value has no side effects
    dependency_path = decode_dependency(args.get("dep", ""))
    name = resolve_name(args.get("name", ""))

    sleep_ms = parse_int(args.get("sleep"))
    if sleep_ms is None or not 0 <= sleep_ms <= MAX_SLEEP_MS:
        sleep_ms = 0

    status_code = parse_int(args.get("code"))
    if status_code is not None and not MIN_STATUS <= status_code <= MAX_STATUS:
        status_code = None

    return ExecutionPlan(name, dependency_path, sleep_ms, status_code)
