"""
Character system for Dungeon Crawler Character Management.

Player characters and the skill catalog they learn from.
"""

from .skills import (
    Skill,
    SkillCatalog,
    DEFAULT_SKILLS,
    CharacterModelError,
    SkillValidationError,
)

from .profiles import (
    Character,
    CharacterValidationError,
    calculate_initial_hit_points,
    STARTING_LEVEL,
    BASE_HIT_POINTS,
    HIT_POINTS_PER_LEVEL,
    ATTRIBUTE_POINTS_PER_LEVEL,
)

__all__ = [
    'Skill',
    'SkillCatalog',
    'DEFAULT_SKILLS',
    'CharacterModelError',
    'SkillValidationError',
    'Character',
    'CharacterValidationError',
    'calculate_initial_hit_points',
    'STARTING_LEVEL',
    'BASE_HIT_POINTS',
    'HIT_POINTS_PER_LEVEL',
    'ATTRIBUTE_POINTS_PER_LEVEL',
]
