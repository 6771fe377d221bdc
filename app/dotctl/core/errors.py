"""Exception hierarchy for dotctl.

Every failure is fail-fast: nothing here is retried. The pipeline maps
these to process exit codes.
"""


class DotctlError(Exception):
    """Base exception for dotctl errors."""

    exit_code: int = 1


class UnsupportedPlatformError(DotctlError):
    """Raised when the host OS is neither macOS nor Linux."""

    def __init__(self, kernel: str) -> None:
        self.kernel = kernel
        super().__init__(f"Unsupported OS: {kernel}")


class ExternalCommandError(DotctlError):
    """Raised when an external command exits with a non-zero status.

    Attributes:
        command: The command that failed.
        returncode: Its exit status, propagated as the process exit code.
    """

    def __init__(self, args: list[str], returncode: int) -> None:
        self.command = list(args)
        self.returncode = returncode
        super().__init__(f"Command failed with exit code {returncode}: {' '.join(args)}")

    @property
    def exit_code(self) -> int:  # type: ignore[override]
        # Killed by a signal: report it the way a shell would (128 + N).
        if self.returncode < 0:
            return 128 - self.returncode
        return self.returncode


class SettingsError(DotctlError):
    """Raised when the settings file cannot be read or validated."""


class MissingLinkSourceError(DotctlError):
    """Raised after linking when one or more link sources did not exist."""

    def __init__(self, sources: list[str]) -> None:
        self.sources = list(sources)
        super().__init__(f"Missing link source(s): {', '.join(sources)}")
