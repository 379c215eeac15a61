"""
Error handling for the ZMX compiler.

Missing sections and malformed placeholders are never errors; only
filesystem failures, bad configuration and misuse of a compiler run are.
"""


class ZmxError(Exception):
    """Base exception for ZMX compilation errors with an optional path and hint."""
    def __init__(self, message, path=None, suggestion=None):
        self.message = message
        self.path = path
        self.suggestion = suggestion
        super().__init__(self._format_error())

    def _format_error(self):
        """Format the error message with the offending path and suggestion."""
        lines = ["\n❌ Compilation Error"]
        if self.path:
            lines.append(f" in '{self.path}'")
        lines.append(":\n")

        lines.append(f"   {self.message}\n")

        if self.suggestion:
            lines.append(f"   💡 {self.suggestion}\n")

        return "".join(lines)


class FileSystemError(ZmxError):
    """Listing, reading or writing on disk failed."""

    @classmethod
    def from_os_error(cls, action, path, error):
        if isinstance(error, FileNotFoundError):
            suggestion = "Check that the path exists"
        elif isinstance(error, PermissionError):
            suggestion = "Check the permissions of the path"
        else:
            suggestion = None
        reason = error.strerror or str(error)
        return cls(f"Could not {action}: {reason}", path=path, suggestion=suggestion)


class ConfigError(ZmxError):
    """The configuration file could not be read or is invalid."""


class RunStateError(ZmxError):
    """A compiler run was driven out of order."""
