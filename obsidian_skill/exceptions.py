"""Errors raised while installing the skill bundle."""

from pathlib import Path


class InstallError(Exception):
    """Base class for installer failures that should be shown to the user
    without a traceback."""

    pass


class BundleNotFoundError(InstallError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Skill source not found at {path}")


class TargetNotFoundError(InstallError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Directory '{path}' does not exist")


class CopyError(InstallError):
    """A resource could not be copied into the target. Files written before
    the failure are left in place."""

    def __init__(self, resource: str, destination: Path, reason: str):
        self.resource = resource
        self.destination = destination
        self.reason = reason
        super().__init__(f"Failed to copy {resource} to {destination}: {reason}")


class InvalidChoiceError(InstallError):
    def __init__(self, choice: str):
        self.choice = choice
        super().__init__("Invalid choice")


class ConfigError(InstallError):
    def __init__(self, source: Path | None, reason: str):
        self.source = source
        self.reason = reason
        where = f" in {source}" if source is not None else ""
        super().__init__(f"Invalid configuration{where}: {reason}")
