# outcome.py - child termination status and display policy
from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Optional

SIGNAL_OFFSET = 128


@dataclass(frozen=True)
class ExitOutcome:
    code: Optional[int] = None       # set when the child exited normally
    signal: Optional[int] = None     # set when the child was killed

    @classmethod
    def exited(cls, code: int) -> "ExitOutcome":
        return cls(code=code)

    @classmethod
    def killed(cls, signal: int) -> "ExitOutcome":
        return cls(signal=signal)

    @property
    def return_code(self) -> int:
        """Exit code, or signal number + 128 like a POSIX shell reports it."""
        if self.signal is not None:
            return self.signal + SIGNAL_OFFSET
        return self.code

    def __str__(self):
        if self.signal is not None:
            return f"killed by signal {self.signal}"
        return f"exited with status {self.code}"


def classify_wait_status(status: int) -> Optional[ExitOutcome]:
    """Map a raw waitpid() status to an ExitOutcome.

    Returns None for stopped or continued children; the caller has to
    wait again.
    """
    if os.WIFEXITED(status):
        return ExitOutcome.exited(os.WEXITSTATUS(status))
    if os.WIFSIGNALED(status):
        return ExitOutcome.killed(os.WTERMSIG(status))
    return None


class DisplayPolicy(enum.Enum):
    ON_SUCCESS = "success"
    ON_FAILURE = "failure"

    def should_emit(self, outcome: ExitOutcome) -> bool:
        succeeded = outcome.return_code == 0
        if self is DisplayPolicy.ON_SUCCESS:
            return succeeded
        return not succeeded
