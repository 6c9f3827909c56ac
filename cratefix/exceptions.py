"""Custom exceptions for cratefix."""


class CrateFixError(Exception):
    """Base exception for all cratefix errors."""


class SourceReadError(CrateFixError):
    """Raised when the Rust source file cannot be read or decoded."""

    def __init__(self, source_path: str, reason: str):
        self.source_path = source_path
        self.reason = reason
        super().__init__(f"{source_path}: {reason}")


class ProcessSpawnError(CrateFixError):
    """Raised when a toolchain subprocess cannot be launched at all.

    A process that starts and exits non-zero is not an error at this level;
    callers inspect the exit status themselves.
    """

    def __init__(self, command: list[str], reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"failed to run '{' '.join(command)}': {reason}")
