"""
Skill Catalog - Dungeon Crawler Character Management

The fixed set of skills any character can learn.
Each skill has a name, what it does, the attribute it trains,
and how many attribute points it costs to learn.
"""

from typing import Iterator, Optional, Sequence, Tuple
from dataclasses import dataclass


# =============================================================================
# EXCEPTIONS
# =============================================================================

class CharacterModelError(Exception):
    """Base exception for character and skill model errors."""
    pass


class SkillValidationError(CharacterModelError, ValueError):
    """Raised when a skill definition breaks the catalog rules."""
    pass


@dataclass(frozen=True)
class Skill:
    """A learnable skill. Immutable once constructed."""

    name: str
    description: str
    attribute: str
    required_points: int

    def __post_init__(self):
        """Reject malformed skill definitions."""
        for field_name in ('name', 'description', 'attribute'):
            if not isinstance(getattr(self, field_name), str):
                raise SkillValidationError(f"Skill {field_name} must be a string")

        if isinstance(self.required_points, bool) or not isinstance(self.required_points, int):
            raise SkillValidationError("Required points must be an integer")
        if self.required_points < 0:
            raise SkillValidationError("Required points cannot be negative")


# =============================================================================
# BUILT-IN SKILLS
# =============================================================================

DEFAULT_SKILLS: Tuple[Skill, ...] = (
    Skill(
        name='Strike',
        description='A powerful strike.',
        attribute='Strength',
        required_points=10,
    ),
    Skill(
        name='Dodge',
        description='Avoid an attack.',
        attribute='Dexterity',
        required_points=15,
    ),
    Skill(
        name='Spellcast',
        description='Cast a spell.',
        attribute='Intelligence',
        required_points=20,
    ),
)


class SkillCatalog:
    """
    Ordered, read-only collection of learnable skills.

    Callers select entries by 1-based ordinal, the same numbering
    shown in the skill menu.
    """

    def __init__(self, skills: Optional[Sequence[Skill]] = None):
        self._skills: Tuple[Skill, ...] = tuple(DEFAULT_SKILLS if skills is None else skills)

    def __len__(self) -> int:
        return len(self._skills)

    def __iter__(self) -> Iterator[Skill]:
        return iter(self._skills)

    def is_valid_ordinal(self, ordinal: int) -> bool:
        """Check that ordinal falls within 1..len(catalog)."""
        if isinstance(ordinal, bool) or not isinstance(ordinal, int):
            return False
        return 1 <= ordinal <= len(self._skills)

    def get(self, ordinal: int) -> Optional[Skill]:
        """Get skill by 1-based ordinal, or None when out of range."""
        if not self.is_valid_ordinal(ordinal):
            return None
        return self._skills[ordinal - 1]

    def find_by_name(self, name: str) -> Optional[Skill]:
        """Find a skill by name, ignoring case."""
        if not name:
            return None
        wanted = name.lower()
        for skill in self._skills:
            if skill.name.lower() == wanted:
                return skill
        return None

    def entries(self) -> Tuple[Skill, ...]:
        """Return the catalog as an immutable snapshot."""
        return self._skills
