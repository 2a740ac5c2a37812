"""
Validation utilities for skill directories.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from skillkit.core.config import settings

logger = logging.getLogger(__name__)

# Constants for validation
FRONTMATTER_DELIMITER = "---"
MAX_NAME_LENGTH = 64
MAX_DESCRIPTION_LENGTH = 1024
KEBAB_CASE_PATTERN = re.compile(r"^[a-z][a-z0-9-]*[a-z0-9]$|^[a-z]$")
ANGLE_BRACKET_PATTERN = re.compile(r"<[^>]+>")
TODO_MARKERS: tuple[str, ...] = ("[TODO", "TODO:")
REQUIRED_FIELDS: tuple[str, ...] = ("name", "description")


class ValidationProfile(StrEnum):
    """
    Set of checks applied to a skill.

    FULL is used by the standalone validator. PACKAGING is the reduced set run
    before building an archive: no length limits and no directory name check.
    """

    FULL = "full"
    PACKAGING = "packaging"


@dataclass
class ValidationResult:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


def _field_pattern(key: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(key)}:[ \t]*(.+)$", re.MULTILINE)


def _check_directory_exists(skill_dir: Path) -> tuple[bool, str]:
    """Check if the skill directory exists."""
    if not skill_dir.is_dir():
        return False, f"Directory not found: {skill_dir}"
    return True, ""


def _check_manifest_exists(manifest_path: Path) -> tuple[bool, str]:
    """Check if the manifest file exists."""
    if not manifest_path.is_file():
        return False, f"{manifest_path.name} not found"
    return True, ""


def extract_frontmatter(content: str) -> tuple[str | None, str]:
    """
    Extract the frontmatter block from a manifest.

    Args:
        content: Full text of the manifest

    Returns:
        tuple of (frontmatter or None, error_message)
    """
    if not content.startswith(FRONTMATTER_DELIMITER):
        return None, f"{settings.SKILL_MANIFEST_NAME} must start with YAML frontmatter ({FRONTMATTER_DELIMITER})"

    end = content.find(FRONTMATTER_DELIMITER, len(FRONTMATTER_DELIMITER))
    if end == -1:
        return None, f"YAML frontmatter must be closed with {FRONTMATTER_DELIMITER}"

    return content[len(FRONTMATTER_DELIMITER) : end].strip(), ""


def parse_frontmatter(frontmatter: str) -> dict[str, str]:
    """
    Parse the interpreted keys of a frontmatter block.

    Only the first line of each required field is taken, the value being the
    rest of that line. Other keys are ignored.
    """
    fields: dict[str, str] = {}
    for key in REQUIRED_FIELDS:
        match = _field_pattern(key).search(frontmatter)
        if match:
            fields[key] = match.group(1)
    return fields


def _check_name(name: str, dir_name: str, profile: ValidationProfile) -> tuple[list[str], list[str]]:
    """Check the skill name format."""
    errors: list[str] = []
    warnings: list[str] = []

    if not KEBAB_CASE_PATTERN.match(name):
        if profile is ValidationProfile.FULL:
            errors.append(
                f'Name "{name}" must be kebab-case '
                "(lowercase letters, digits, hyphens only, cannot start/end with hyphen)"
            )
        else:
            errors.append(f'Name "{name}" must be kebab-case')

    if "--" in name:
        errors.append(f'Name "{name}" cannot contain consecutive hyphens')

    if profile is ValidationProfile.FULL:
        if len(name) > MAX_NAME_LENGTH:
            errors.append(f'Name "{name}" exceeds maximum length of {MAX_NAME_LENGTH} characters')

        if name != dir_name:
            warnings.append(f'Name "{name}" does not match directory name "{dir_name}"')

    return errors, warnings


def _check_description(description: str, profile: ValidationProfile) -> tuple[list[str], list[str]]:
    """Check the skill description content."""
    errors: list[str] = []
    warnings: list[str] = []

    # Tags are usually leftovers from HTML or templates
    if ANGLE_BRACKET_PATTERN.search(description):
        errors.append("Description should not contain angle brackets")

    if profile is ValidationProfile.FULL and len(description) > MAX_DESCRIPTION_LENGTH:
        errors.append(f"Description exceeds maximum length of {MAX_DESCRIPTION_LENGTH} characters")

    if any(marker in description for marker in TODO_MARKERS):
        warnings.append("Description contains TODO placeholder")

    return errors, warnings


def validate_skill(skill_dir: str | Path, profile: ValidationProfile = ValidationProfile.FULL) -> ValidationResult:
    """
    Validate a skill directory and its manifest.

    Structural problems (missing directory, missing manifest, malformed
    frontmatter) stop validation with a single error. Field problems are
    accumulated.

    Args:
        skill_dir: Path to the skill directory
        profile: Which set of checks to apply

    Returns:
        ValidationResult with the errors and warnings found
    """
    skill_path = Path(skill_dir)
    result = ValidationResult()

    is_valid, error_message = _check_directory_exists(skill_path)
    if not is_valid:
        result.errors.append(error_message)
        return result

    manifest_path = skill_path / settings.SKILL_MANIFEST_NAME
    is_valid, error_message = _check_manifest_exists(manifest_path)
    if not is_valid:
        result.errors.append(error_message)
        return result

    try:
        content = manifest_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read {manifest_path}: {e}")
        result.errors.append(f"Could not read {manifest_path.name}: {e}")
        return result

    frontmatter, error_message = extract_frontmatter(content)
    if frontmatter is None:
        result.errors.append(error_message)
        return result

    fields = parse_frontmatter(frontmatter)
    for key in REQUIRED_FIELDS:
        if key not in fields:
            result.errors.append(f"Missing required field: {key}")

    if "name" in fields:
        # resolve() so that "." or a trailing slash still yields the real directory name
        errors, warnings = _check_name(fields["name"].strip(), skill_path.resolve().name, profile)
        result.errors.extend(errors)
        result.warnings.extend(warnings)

    if "description" in fields:
        errors, warnings = _check_description(fields["description"].strip(), profile)
        result.errors.extend(errors)
        result.warnings.extend(warnings)

    logger.debug(
        f"Validated {skill_path} ({profile.value}): {len(result.errors)} errors, {len(result.warnings)} warnings"
    )
    return result
