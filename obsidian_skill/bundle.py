"""Locating and describing the markdown bundle shipped with the package."""

from pathlib import Path

from frontmatter import loads as fm_loads
from pydantic import BaseModel

from obsidian_skill.config import InstallerConfig
from obsidian_skill.exceptions import BundleNotFoundError
from obsidian_skill.io import get_asset_path
from obsidian_skill.logger import get_logger

logger = get_logger(__name__)

SKILL_ENTRYPOINT = "SKILL.md"


class SkillMetadata(BaseModel):
    """Frontmatter of the skill's SKILL.md."""

    name: str
    description: str = ""


class SkillBundle:
    """
    The static content copied into a project. The layout mirrors what lands
    under the target's configuration directory:

        skills/<skill_name>/SKILL.md
        skills/<skill_name>/reference/...
        commands/<skill_name>.md   (optional)

    """

    def __init__(self, root: Path, skill_name: str = "obsidian"):
        self.root = root
        self.skill_name = skill_name

    @classmethod
    def locate(cls, config: InstallerConfig | None = None) -> "SkillBundle":
        """
        Find the bundle, preferring a configured override over the packaged copy.
        Raises BundleNotFoundError when the skill directory is absent.

        """
        config = config or InstallerConfig()
        root = config.bundle_dir or get_asset_path("bundle")

        bundle = cls(root, skill_name=config.skill_name)
        if not bundle.skill_source.is_dir():
            raise BundleNotFoundError(bundle.skill_source)

        logger.debug(f"Using skill bundle at {bundle.root}")
        return bundle

    @property
    def skill_source(self) -> Path:
        return self.root / "skills" / self.skill_name

    @property
    def command_source(self) -> Path:
        return self.root / "commands" / f"{self.skill_name}.md"

    def has_command(self) -> bool:
        return self.command_source.is_file()

    def files(self) -> list[Path]:
        """Every file of the skill tree, relative to the skill directory."""
        return sorted(
            path.relative_to(self.skill_source)
            for path in self.skill_source.rglob("*")
            if path.is_file()
        )

    def metadata(self) -> SkillMetadata:
        entrypoint = self.skill_source / SKILL_ENTRYPOINT
        if not entrypoint.is_file():
            return SkillMetadata(name=self.skill_name)

        post = fm_loads(entrypoint.read_text(encoding="utf-8"))
        return SkillMetadata(
            name=str(post.metadata.get("name") or self.skill_name),
            description=str(post.metadata.get("description") or ""),
        )
