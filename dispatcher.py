# dispatcher.py - feed each file to COMMAND and print the ones that pass
from __future__ import annotations

import errno
import os
import stat
import sys
from dataclasses import dataclass
from typing import Iterable

import external_runner
from errors import FatalError
from outcome import DisplayPolicy, ExitOutcome
from tokenizer import Token


@dataclass
class RunState:
    had_nonfatal_error: bool = False


class Dispatcher:
    """Runs COMMAND once per token, strictly one child at a time.

    Problems with a single token (missing file, no permission, directory)
    are reported and skipped. Everything else raises FatalError.
    """

    def __init__(self, argv, policy=DisplayPolicy.ON_SUCCESS, discard_stderr=False,
                 output=None, errout=None):
        self.argv = list(argv)
        self.policy = policy
        self.discard_stderr = discard_stderr
        self.output = output if output is not None else sys.stdout.buffer
        self.errout = errout if errout is not None else sys.stderr
        self.state = RunState()
        self.sink = None

    # -----------------------
    # Per-token steps
    # -----------------------
    def _skip(self, token: Token, reason):
        self.state.had_nonfatal_error = True
        print(f"{os.fsdecode(token.path)}: {reason}", file=self.errout, flush=True)

    def _open(self, token: Token):
        try:
            handle = open(token.path, "rb")
        except OSError as e:
            self._skip(token, e.strerror or e)
            return None
        try:
            st = os.fstat(handle.fileno())
        except OSError as e:
            handle.close()
            raise FatalError(os.fsdecode(token.path), e.strerror or e) from e
        if stat.S_ISDIR(st.st_mode):
            handle.close()
            self._skip(token, os.strerror(errno.EISDIR))
            return None
        return handle

    def run_one(self, token: Token) -> ExitOutcome | None:
        """Dispatch a single token. Returns None when the token was skipped."""
        handle = self._open(token)
        if handle is None:
            return None
        with handle:
            env = external_runner.child_environment(token.path)
            proc = external_runner.spawn_with_input(
                self.argv,
                stdin=handle,
                stdout=self.sink,
                stderr=self.sink if self.discard_stderr else None,
                env=env,
            )
        outcome = external_runner.reap(proc)
        if self.policy.should_emit(outcome):
            self.emit(token)
        return outcome

    def emit(self, token: Token):
        try:
            self.output.write(token.record)
            self.output.flush()
        except OSError as e:
            raise FatalError("write", e.strerror or e) from e

    # -----------------------
    # Whole run
    # -----------------------
    def run(self, tokens: Iterable[Token]) -> RunState:
        self.sink = external_runner.open_discard_sink()
        try:
            for token in tokens:
                self.run_one(token)
        finally:
            self.sink.close()
            self.sink = None
        return self.state
