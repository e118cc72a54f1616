"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — every value converted
  1   Partial — some values were rejected and skipped
  2   Error — invalid base, aborted batch, bad options
"""

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    PARTIAL = 1
    ERROR = 2
