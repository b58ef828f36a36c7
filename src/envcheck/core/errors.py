"""
Error types raised by envcheck.

Core modules raise these; the CLI reports them and exits with status 1.
"""


class EnvCheckError(Exception):
    """Base class for all envcheck failures."""

    # Optional follow-up shown under the error message
    hint = None


class ManifestNotFound(EnvCheckError):
    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"{self.path} not found.")


class ManifestParseError(EnvCheckError):
    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not parse {self.path}: {reason}")


class NoEnvCheckConfigured(EnvCheckError):
    hint = "Run 'envcheck --add NAME...' or 'envcheck --sync' to track variables."

    def __init__(self, path, reason: str = "No \"envCheck\" configuration found"):
        self.path = str(path)
        super().__init__(f"{reason} in {self.path}.")


class EnvFileNotFound(EnvCheckError):
    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"{self.path} file not found.")


class NoVariablesProvided(EnvCheckError):
    hint = "Usage: envcheck --add NAME..."

    def __init__(self):
        super().__init__("No variables provided to add.")


class UnknownCommand(EnvCheckError):
    hint = "Use --help to see available commands"

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Unknown command: {command}")


class EnvFileParseError(EnvCheckError):
    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not read {self.path}: {reason}")
