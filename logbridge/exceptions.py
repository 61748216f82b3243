# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Exceptions for the logbridge package."""


class LogBridgeError(Exception):
    """Base exception for logbridge errors."""
    pass


class ConfigurationError(LogBridgeError):
    """Raised when logging engine configuration cannot be understood."""
    pass
