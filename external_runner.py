# external_runner.py - spawn one command per file and reap it
from __future__ import annotations

import os
import subprocess

from errors import ExecFailure, FatalError
from outcome import ExitOutcome, classify_wait_status

QUERY_FILENAME = b"QUERY_FILENAME"


def open_discard_sink():
    """Open the null device once; every child writes its stdout there."""
    try:
        return open(os.devnull, "wb")
    except OSError as e:
        raise FatalError(os.devnull, e.strerror or e) from e


def child_environment(path: bytes, base=None) -> dict:
    """Copy of the controller environment with QUERY_FILENAME bound to path."""
    env = dict(os.environb if base is None else base)
    if b"\0" in path:
        raise FatalError("setenv", "embedded null byte in file name")
    env[QUERY_FILENAME] = path
    return env


def spawn_with_input(argv: list[str], stdin, stdout, stderr=None, env=None) -> subprocess.Popen:
    """Start argv with stdin/stdout/stderr redirected. Never goes through a shell.

    Popen reports a failed exec back through its own close-on-exec error
    pipe, so a command that cannot be started surfaces here as an OSError
    carrying the executable as ``filename``. Errors without a filename
    come from creating the process itself.
    """
    try:
        return subprocess.Popen(argv, stdin=stdin, stdout=stdout, stderr=stderr, env=env)
    except OSError as e:
        if e.filename is not None:
            raise ExecFailure(argv[0], e.strerror or e) from e
        raise FatalError("fork", e.strerror or e) from e


def reap(proc: subprocess.Popen) -> ExitOutcome:
    """Block until proc terminates. Stopped children are waited on again."""
    while True:
        try:
            _, status = os.waitpid(proc.pid, os.WUNTRACED)
        except OSError as e:
            raise FatalError("wait", e.strerror or e) from e
        outcome = classify_wait_status(status)
        if outcome is None:
            continue
        # keep Popen from trying to reap the pid again
        proc.returncode = -outcome.signal if outcome.signal is not None else outcome.code
        return outcome
