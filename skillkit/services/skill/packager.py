"""
Utilities for packaging skills into distributable zip files.
"""

import logging
import os
import subprocess
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from skillkit.core.config import settings
from skillkit.services.skill.validator import ValidationProfile, ValidationResult, validate_skill

logger = logging.getLogger(__name__)

ARCHIVE_EXTENSION = ".zip"


class SkillPackagingError(ValueError):
    """Raised when the external archiver fails or cannot be started."""


@dataclass
class PackagingResult:
    validation: ValidationResult
    archive_path: Path | None = None
    files: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.validation.valid and self.archive_path is not None


def collect_skill_files(skill_dir: Path) -> list[str]:
    """
    List every file under a skill directory.

    Args:
        skill_dir: Root of the skill

    Returns:
        File paths relative to skill_dir, in directory enumeration order
    """
    files: list[str] = []
    for root, _, filenames in os.walk(skill_dir):
        root_path = Path(root)
        for filename in filenames:
            files.append(str((root_path / filename).relative_to(skill_dir)))
    return files


def get_archive_path(skill_dir: Path, output_dir: Path) -> Path:
    """Return the archive path for a skill, named after its directory."""
    return output_dir / f"{skill_dir.resolve().name}{ARCHIVE_EXTENSION}"


def create_skill_archive(skill_dir: Path, archive_path: Path) -> None:
    """
    Compress a skill directory with the external archiver.

    Any existing archive at archive_path is removed first so that repeated
    runs never merge into a previous archive.

    Args:
        skill_dir: Directory to compress
        archive_path: Target archive file

    Raises:
        SkillPackagingError: If the target cannot be prepared, or the archiver fails or cannot be run
    """
    # The archiver runs inside skill_dir, so the target must be absolute
    target = archive_path.resolve()

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        if target.exists():
            logger.debug(f"Removing existing archive {target}")
            target.unlink()
    except OSError as e:
        logger.error(f"Could not prepare archive {target}: {e}")
        raise SkillPackagingError(f"Could not prepare archive {target}: {e}") from e

    try:
        process = subprocess.run(
            [settings.ARCHIVE_COMMAND, "-r", str(target), "."],
            cwd=skill_dir,
            capture_output=True,
            text=True,
            check=True,
        )

        logger.debug(f"Archiver output: {process.stdout}")
    except subprocess.CalledProcessError as e:
        logger.error(f"Failed to create archive {target}: {e.stderr}")
        raise SkillPackagingError(f"{settings.ARCHIVE_COMMAND} exited with code {e.returncode}: {e.stderr}") from e
    except OSError as e:
        logger.error(f"Could not run {settings.ARCHIVE_COMMAND}: {e}")
        raise SkillPackagingError(f"Could not run {settings.ARCHIVE_COMMAND}: {e}") from e


def package_skill(
    skill_dir: str | Path,
    output_dir: str | Path | None = None,
    on_validated: Callable[[ValidationResult], None] | None = None,
) -> PackagingResult:
    """
    Validate a skill and package it into an archive.

    1. Validates the skill with the packaging profile
    2. Stops without touching the filesystem if there are errors
    3. Reports the passing validation through on_validated
    4. Lists the files to include
    5. Creates <output_dir>/<skill name>.zip

    Args:
        skill_dir: Path to the skill directory
        output_dir: Where the archive is written, current directory by default
        on_validated: Called with the validation result before archiving starts

    Returns:
        PackagingResult; archive_path is None when validation failed

    Raises:
        SkillPackagingError: If the archive could not be created
    """
    skill_path = Path(skill_dir)
    output_path = Path(output_dir) if output_dir is not None else Path.cwd()

    logger.info(f"Validating skill {skill_path}")
    validation = validate_skill(skill_path, ValidationProfile.PACKAGING)
    result = PackagingResult(validation=validation)

    if not validation.valid:
        logger.info(f"Skill {skill_path} failed validation with {len(validation.errors)} errors")
        return result

    for warning in validation.warnings:
        logger.warning(f"{skill_path}: {warning}")
    if on_validated is not None:
        on_validated(validation)

    files = collect_skill_files(skill_path)
    archive_path = get_archive_path(skill_path, output_path)
    logger.info(f"Packaging {len(files)} files into {archive_path}")

    create_skill_archive(skill_path, archive_path)

    result.archive_path = archive_path
    result.files = files
    logger.info(f"Completed packaging of {skill_path}")
    return result
