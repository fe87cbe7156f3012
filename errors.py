# errors.py - run-level failures that abort query with status 1
from __future__ import annotations


class FatalError(Exception):
    """Failure that ends the whole run.

    ``operation`` names what was being attempted (``read``, ``fork``,
    ``wait``, a command name...) and ``cause`` why it failed.
    """

    def __init__(self, operation, cause):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation}: {cause}")


class ExecFailure(FatalError):
    """The child was created but the command could not be executed."""
