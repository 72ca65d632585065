from pathlib import Path

import pytest

from obsidian_skill.bundle import SkillBundle
from obsidian_skill.config import InstallerConfig


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep developer overrides out of the test runs."""
    for name in ("BUNDLE_DIR", "SKILL_NAME", "CLAUDE_DIR_NAME"):
        monkeypatch.delenv(f"OBSIDIAN_SKILL_{name}", raising=False)


@pytest.fixture
def bundle_root(tmp_path: Path) -> Path:
    """A small bundle laid out like the packaged one."""
    root = tmp_path / "bundle"
    skill = root / "skills" / "obsidian"
    (skill / "reference").mkdir(parents=True)
    (skill / "SKILL.md").write_text(
        "---\nname: obsidian\ndescription: Test skill\n---\n\n# Overview\n"
    )
    (skill / "reference" / "vault.md").write_text("# Vault\n")
    (skill / "reference" / "views.md").write_text("# Views\n")

    (root / "commands").mkdir()
    (root / "commands" / "obsidian.md").write_text("Load the skill\n")
    return root


@pytest.fixture
def config(bundle_root: Path) -> InstallerConfig:
    return InstallerConfig(bundle_dir=bundle_root)


@pytest.fixture
def bundle(config: InstallerConfig) -> SkillBundle:
    return SkillBundle.locate(config)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    project = tmp_path / "project"
    project.mkdir()
    return project
