"""
Puzzle Validation - Consistency checks for puzzle specs.

Validates that:
1. Required identifiers are present
2. Identifiers are unique (planks, grid bolts)
3. Every plank spans at least one bolt, without repeats
4. Plank bolts are placed on the grid (warning only: unplaced bolts
   still take part in removal, they are just not drawn)
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

from .puzzle_spec import PuzzleSpec, Plank

logger = logging.getLogger(__name__)


class PuzzleValidationError(Exception):
    """Raised when puzzle validation fails."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Puzzle validation failed with {len(errors)} error(s)")


@dataclass
class ValidationResult:
    """Result of validation, with errors and warnings."""
    valid: bool
    errors: list[str]
    warnings: list[str]


def validate_puzzle(spec: PuzzleSpec, raise_on_error: bool = False) -> ValidationResult:
    """
    Validate a complete puzzle specification.

    Returns ValidationResult with errors and warnings.
    Raises PuzzleValidationError if raise_on_error=True and errors exist.
    """
    errors: list[str] = []
    warnings: list[str] = []

    if not spec.puzzle_id:
        errors.append("puzzle_id is required")
    if not spec.name:
        errors.append("name is required")

    # Grid bolts must be unique
    seen_bolts: set[str] = set()
    for bolt_id in spec.bolt_ids:
        if not bolt_id:
            errors.append("Grid contains an empty bolt ID")
        elif bolt_id in seen_bolts:
            errors.append(f"Bolt '{bolt_id}' appears more than once in the grid")
        seen_bolts.add(bolt_id)

    seen_planks: set[str] = set()
    for plank in spec.planks:
        if plank.id in seen_planks:
            errors.append(f"Duplicate plank ID '{plank.id}'")
        seen_planks.add(plank.id)
        errors.extend(_validate_plank(plank))

        for bolt_id in plank.bolts:
            if bolt_id and spec.position_of(bolt_id) is None:
                warnings.append(
                    f"Plank '{plank.id}' references bolt '{bolt_id}' which is not on the grid"
                )

    # Grid bolts nobody uses
    held = {b for plank in spec.planks for b in plank.bolts}
    for bolt_id in spec.bolt_ids:
        if bolt_id and bolt_id not in held:
            warnings.append(f"Bolt '{bolt_id}' is not held by any plank")

    if not spec.planks:
        warnings.append("No planks defined - puzzle is trivially solved")

    result = ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )

    if errors:
        logger.debug("Puzzle %s failed validation: %s", spec.puzzle_id, errors)
        if raise_on_error:
            raise PuzzleValidationError(errors)

    return result


def _validate_plank(plank: Plank) -> list[str]:
    """Validate a single plank definition."""
    errors = []
    if not plank.id:
        errors.append("Plank has empty ID")
    if not plank.bolts:
        errors.append(f"Plank '{plank.id}' spans no bolts")
    if len(set(plank.bolts)) != len(plank.bolts):
        errors.append(f"Plank '{plank.id}' lists a bolt more than once")
    if any(not b for b in plank.bolts):
        errors.append(f"Plank '{plank.id}' references an empty bolt ID")
    if plank.level < 0:
        errors.append(f"Plank '{plank.id}' has negative level {plank.level}")
    return errors
