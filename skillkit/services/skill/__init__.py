"""
Skill packaging and validation services.
"""

from skillkit.services.skill.packager import PackagingResult, SkillPackagingError, package_skill
from skillkit.services.skill.validator import ValidationProfile, ValidationResult, validate_skill

__all__ = [
    "PackagingResult",
    "SkillPackagingError",
    "ValidationProfile",
    "ValidationResult",
    "package_skill",
    "validate_skill",
]
