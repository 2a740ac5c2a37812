"""
Command line entry points for validating and packaging skills.
"""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

from skillkit.core.monitoring import init_sentry
from skillkit.services.skill.packager import SkillPackagingError, package_skill
from skillkit.services.skill.validator import ValidationResult, validate_skill

BULLET = "   •"


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors on stdout with exit code 1."""

    def error(self, message: str) -> NoReturn:
        self.print_help(sys.stdout)
        print(f"\n{self.prog}: error: {message}")
        sys.exit(1)


def _print_items(header: str, items: Sequence[str]) -> None:
    print(header)
    for item in items:
        print(f"{BULLET} {item}")


def build_validate_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="skillkit-validate",
        description="Validate skill structure and metadata.",
        epilog="Example:\n  skillkit-validate .claude/skills/my-skill",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("skill_dir", help="path to the skill directory")
    return parser


def build_package_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="skillkit-package",
        description="Validate a skill and package it into <skill-name>.zip.",
        epilog=(
            "Examples:\n"
            "  skillkit-package .claude/skills/my-skill\n"
            "  skillkit-package .claude/skills/my-skill ./dist"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("skill_dir", help="path to the skill directory")
    parser.add_argument("output_dir", nargs="?", default=".", help="where to write the archive (default: .)")
    return parser


def validate(argv: Sequence[str] | None = None) -> int:
    """Validate a skill directory. Returns the process exit code."""
    args = build_validate_parser().parse_args(argv)

    print(f"🔍 Validating skill: {args.skill_dir}\n")
    result = validate_skill(args.skill_dir)

    if result.errors:
        _print_items("❌ Errors:", result.errors)

    if result.warnings:
        _print_items("\n⚠️  Warnings:", result.warnings)

    if result.valid:
        print("✅ Skill validation passed")
        return 0

    print("\n❌ Skill validation failed")
    return 1


def _print_validation_passed(validation: ValidationResult) -> None:
    if validation.warnings:
        _print_items("⚠️  Warnings:", validation.warnings)
        print()
    print("✅ Validation passed\n")


def package(argv: Sequence[str] | None = None) -> int:
    """Validate and package a skill directory. Returns the process exit code."""
    args = build_package_parser().parse_args(argv)
    skill_dir = Path(args.skill_dir)

    if not skill_dir.is_dir():
        print(f"❌ Error: Directory not found: {args.skill_dir}")
        return 1

    print(f"📦 Packaging skill: {args.skill_dir}")
    print(f"   Output: {args.output_dir}\n")
    print("🔍 Validating skill...\n")

    try:
        result = package_skill(skill_dir, args.output_dir, on_validated=_print_validation_passed)
    except SkillPackagingError as e:
        print(f"❌ Error creating zip: {e}")
        return 1

    if result.validation.errors:
        _print_items("❌ Validation errors:", result.validation.errors)
        return 1

    print(f"📦 Packaged {len(result.files)} files")
    print(f"\n✅ Created: {result.archive_path}")
    _print_items("\nIncluded files:", result.files)
    return 0


def validate_main() -> None:
    init_sentry()
    sys.exit(validate())


def package_main() -> None:
    init_sentry()
    sys.exit(package())
