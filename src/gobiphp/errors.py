"""Error taxonomy for execution results.

Nothing in the core raises these: each kind is carried as a value on
``ExecutionResult.error_kind`` so the front end decides how to present it.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Why an ``ExecutionResult`` is flagged as an error.

    - INTERPRETER_UNAVAILABLE: discovery found no usable interpreter
    - SPAWN_FAILURE: the OS refused to start the child process
    - NON_ZERO_EXIT: the interpreter ran and exited with a non-zero status
    - BUSY: another execution is still in flight for this session
    - EMPTY_SOURCE: the source text is blank, nothing was run
    """

    INTERPRETER_UNAVAILABLE = "interpreter_unavailable"
    SPAWN_FAILURE = "spawn_failure"
    NON_ZERO_EXIT = "non_zero_exit"
    BUSY = "busy"
    EMPTY_SOURCE = "empty_source"
