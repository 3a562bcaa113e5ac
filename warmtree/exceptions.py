"""Custom exceptions for warmtree"""

from typing import Optional


class WarmtreeError(Exception):
    """Base exception for all warmtree errors."""
    pass


class ExternalToolError(WarmtreeError):
    """Exception raised when the external git command fails or cannot start."""

    def __init__(self, operation: str, stderr: str = "", exit_code: Optional[int] = None):
        self.operation = operation
        self.stderr = stderr
        self.exit_code = exit_code

        error_msg = f"Git command '{operation}' failed"
        if exit_code is not None:
            error_msg += f" (exit {exit_code})"
        if stderr:
            error_msg += f": {stderr}"

        super().__init__(error_msg)
