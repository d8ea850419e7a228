"""
Player Character Profiles - Dungeon Crawler Character Management

One player character: identity, stats, and the skills they have learned.
All stat changes go through level_up() and try_add_skill(), which
keep the point budget and skill list consistent.
"""

from typing import Dict, List, Any, Tuple

from sheets import get_sheet_renderer

from .skills import Skill, CharacterModelError


# =============================================================================
# PROGRESSION CONSTANTS
# =============================================================================

STARTING_LEVEL = 1
BASE_HIT_POINTS = 10
HIT_POINTS_PER_LEVEL = 5
ATTRIBUTE_POINTS_PER_LEVEL = 10


def calculate_initial_hit_points(attribute_points: int) -> int:
    """Starting health: base plus half the starting attribute points, rounded down."""
    return BASE_HIT_POINTS + attribute_points // 2


class Character:
    """
    A player character.

    Stats are read-only properties. The character is not safe for
    concurrent mutation without external locking.
    """

    def __init__(self, name: str, character_class: str, attribute_points: int):
        _require_text(name, 'name')
        _require_text(character_class, 'class')
        if isinstance(attribute_points, bool) or not isinstance(attribute_points, int):
            raise CharacterValidationError("Attribute points must be a whole number")
        if attribute_points < 0:
            raise CharacterValidationError("Attribute points cannot be negative")

        self._name = name
        self._class = character_class
        self._level = STARTING_LEVEL
        self._hit_points = calculate_initial_hit_points(attribute_points)
        self._available_attribute_points = attribute_points
        self._skills: List[Skill] = []

    # -------------------------------------------------------------------------
    # READ-ONLY STATE
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def character_class(self) -> str:
        return self._class

    @property
    def level(self) -> int:
        return self._level

    @property
    def hit_points(self) -> int:
        return self._hit_points

    @property
    def available_attribute_points(self) -> int:
        return self._available_attribute_points

    @property
    def skills(self) -> Tuple[Skill, ...]:
        """Learned skills in the order they were acquired."""
        return tuple(self._skills)

    # -------------------------------------------------------------------------
    # PROGRESSION
    # -------------------------------------------------------------------------

    def level_up(self):
        """Gain a level: more health and more points to spend on skills."""
        self._level += 1
        self._hit_points += HIT_POINTS_PER_LEVEL
        self._available_attribute_points += ATTRIBUTE_POINTS_PER_LEVEL

    def has_skill(self, skill_name: str) -> bool:
        return any(s.name == skill_name for s in self._skills)

    def can_afford(self, skill: Skill) -> bool:
        return self._available_attribute_points >= skill.required_points

    def try_add_skill(self, skill: Skill) -> bool:
        """
        Learn a skill and pay its point cost.

        Returns False without changing anything when the skill is already
        known or the character cannot afford it.
        """
        if skill is None:
            raise TypeError("skill must not be None")

        if self.has_skill(skill.name):
            return False
        if not self.can_afford(skill):
            return False

        self._skills.append(skill)
        self._available_attribute_points -= skill.required_points
        return True

    # -------------------------------------------------------------------------
    # DISPLAY
    # -------------------------------------------------------------------------

    def render(self) -> str:
        """Multi-line character sheet."""
        return get_sheet_renderer().render_character(self)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Character(name={self._name!r}, character_class={self._class!r}, "
            f"level={self._level})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot of the character as plain data."""
        return {
            'name': self._name,
            'class': self._class,
            'level': self._level,
            'hit_points': self._hit_points,
            'available_attribute_points': self._available_attribute_points,
            'skills': [s.name for s in self._skills],
        }


def _require_text(value, label: str):
    """Reject None, non-string and blank values for required text fields."""
    if value is None:
        raise CharacterValidationError(f"Character {label} is required")
    if not isinstance(value, str):
        raise CharacterValidationError(f"Character {label} must be text")
    if not value.strip():
        raise CharacterValidationError(f"Character {label} cannot be empty")


# =============================================================================
# EXCEPTIONS
# =============================================================================

class CharacterValidationError(CharacterModelError, ValueError):
    """Raised when a character is created with missing or invalid details."""
    pass
