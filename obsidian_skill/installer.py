"""Copies the skill bundle into a project's configuration directory."""

import shutil
from collections.abc import Callable
from pathlib import Path

from pydantic import BaseModel

from obsidian_skill.bundle import SkillBundle
from obsidian_skill.config import InstallerConfig
from obsidian_skill.exceptions import CopyError, TargetNotFoundError
from obsidian_skill.logger import get_logger

logger = get_logger(__name__)

# (message, destination) pairs reported after each resource is copied
StepCallback = Callable[[str, Path], None]


class InstallResult(BaseModel):
    """Where everything ended up after a successful install."""

    target_dir: Path
    skill_target: Path
    command_target: Path | None = None
    copied_files: list[Path] = []


class SkillInstaller:
    """Installs a SkillBundle into target directories."""

    def __init__(self, bundle: SkillBundle, config: InstallerConfig | None = None):
        self.bundle = bundle
        self.config = config or InstallerConfig()

    def install(
        self, target_dir: Path, on_step: StepCallback | None = None
    ) -> InstallResult:
        """
        Copy the skill tree and the slash command into ``target_dir``.

        The target must already exist; nothing is written otherwise. Existing
        files at the destination are overwritten, so running this twice yields
        the same result. A failure part way through leaves whatever was already
        copied in place.

        """
        if not target_dir.is_dir():
            raise TargetNotFoundError(target_dir)

        skill_target = self.config.skill_target(target_dir)
        command_dir = self.config.command_target(target_dir)

        logger.info(f"Installing skill '{self.bundle.skill_name}' into {target_dir}")

        try:
            skill_target.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CopyError("skill files", skill_target, str(e)) from e
        try:
            command_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CopyError("slash command", command_dir, str(e)) from e

        copied = self._copy_skill(target_dir, skill_target)
        if on_step:
            on_step("Skill files copied successfully", skill_target)

        command_target = None
        if self.bundle.has_command():
            command_target = self._copy_command(command_dir)
            copied.append(command_target.relative_to(target_dir))
            if on_step:
                on_step("Slash command copied successfully", command_target)
        else:
            logger.debug(f"No slash command at {self.bundle.command_source}, skipping")

        return InstallResult(
            target_dir=target_dir,
            skill_target=skill_target,
            command_target=command_target,
            copied_files=copied,
        )

    def _copy_skill(self, target_dir: Path, skill_target: Path) -> list[Path]:
        source = self.bundle.skill_source
        try:
            shutil.copytree(source, skill_target, dirs_exist_ok=True)
        except OSError as e:
            raise CopyError("skill files", skill_target, str(e)) from e

        copied = [
            (skill_target / path).relative_to(target_dir)
            for path in self.bundle.files()
        ]
        logger.debug(f"Copied {len(copied)} skill files to {skill_target}")
        return copied

    def _copy_command(self, command_dir: Path) -> Path:
        destination = command_dir / self.config.command_filename
        try:
            shutil.copy2(self.bundle.command_source, destination)
        except OSError as e:
            raise CopyError("slash command", destination, str(e)) from e

        logger.debug(f"Copied slash command to {destination}")
        return destination
