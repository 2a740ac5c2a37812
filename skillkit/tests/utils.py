"""
Common test utilities for all tests in the application.
"""

from pathlib import Path


def build_manifest(name: str | None = "foo-bar", description: str | None = '"does a thing"', body: str = "") -> str:
    """
    Build SKILL.md content with the given frontmatter fields.

    Passing None for a field leaves it out of the frontmatter.
    """
    lines = ["---"]
    if name is not None:
        lines.append(f"name: {name}")
    if description is not None:
        lines.append(f"description: {description}")
    lines.append("---")
    lines.append("")
    lines.append(body or "# Skill\n")
    return "\n".join(lines)


def write_skill(
    parent: Path,
    dir_name: str = "foo-bar",
    manifest: str | None = None,
    extra_files: dict[str, str] | None = None,
) -> Path:
    """
    Create a skill directory under parent.

    Args:
        parent: Directory in which the skill is created
        dir_name: Name of the skill directory
        manifest: SKILL.md content, a valid manifest for dir_name by default
        extra_files: Relative path -> content of additional files

    Returns:
        Path to the skill directory
    """
    skill_dir = parent / dir_name
    skill_dir.mkdir(parents=True)

    content = manifest if manifest is not None else build_manifest(name=dir_name)
    (skill_dir / "SKILL.md").write_text(content, encoding="utf-8")

    for relative_path, file_content in (extra_files or {}).items():
        file_path = skill_dir / relative_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(file_content, encoding="utf-8")

    return skill_dir
