"""Custom exceptions for ts-typie."""


class TypieError(Exception):
    """Base exception for all ts-typie errors."""


class ManifestError(TypieError):
    """Raised when package.json exists but cannot be parsed."""


class RegistryError(TypieError):
    """Raised when the registry cannot be reached (connection failure, timeout)."""

    def __init__(self, package_name: str, reason: str):
        self.package_name = package_name
        self.reason = reason
        super().__init__(f"registry lookup for '{package_name}' failed: {reason}")


class InstallError(TypieError):
    """Raised when the package manager exits with a non-zero status."""

    def __init__(self, command: list[str], returncode: int, stderr: str):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            f"install command failed (exit {returncode}): {' '.join(command)}"
        )


class ToolNotFoundError(TypieError):
    """Raised when an install is attempted without a usable package manager."""
