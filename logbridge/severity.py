# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Message severity levels."""

from enum import IntEnum


class MessageSeverity(IntEnum):
    """Closed set of severities a message can carry.

    A message may hold a severity outside this set (for example a bare
    integer). Loggers treat such values as unmapped.
    """

    DEBUG = 1
    INFORMATIONAL = 2
    WARNING = 3
    ERROR = 4
