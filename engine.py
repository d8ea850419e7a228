"""
Dungeon Crawler Character Management - Roster Engine

Owns every character created in this session and the skill catalog.
The console shell calls into this module; it never edits characters directly.

This module is the single source of truth for:
- The character roster (insertion order, duplicates allowed)
- Skill assignment rules and their user-facing messages
- Level-up requests
- Read-only views of characters and skills

Not safe for concurrent mutation without external locking.
"""

import logging
from typing import NamedTuple, Optional, List, Tuple

from characters import (
    Character,
    CharacterModelError,
    CharacterValidationError,
    Skill,
    SkillCatalog,
    SkillValidationError,
)
from sheets import get_sheet_renderer

logger = logging.getLogger(__name__)


# =============================================================================
# USER-FACING MESSAGES
# =============================================================================

MSG_CHARACTER_NOT_FOUND = "Character not found!"
MSG_INVALID_SKILL = "Invalid skill selection!"
MSG_NOT_ENOUGH_POINTS = "Not enough attribute points are available!"
MSG_SKILL_FAILED = "Failed to add skill"


class CommandResult(NamedTuple):
    """Outcome of a roster command. Unpacks as (success, message)."""
    success: bool
    message: str


# =============================================================================
# ROSTER MANAGER
# =============================================================================

class RosterManager:
    """
    Keeps track of all characters and the skills they can learn.

    Characters are addressed by name, ignoring case. When two characters
    share a name only the first one created can be reached.
    """

    def __init__(self, catalog: Optional[SkillCatalog] = None):
        self.catalog = catalog if catalog is not None else SkillCatalog()
        self._characters: List[Character] = []

    def __len__(self) -> int:
        return len(self._characters)

    # -------------------------------------------------------------------------
    # COMMANDS
    # -------------------------------------------------------------------------

    def create_character(self, name: str, character_class: str, attribute_points: int) -> Character:
        """
        Create a character and add it to the roster.

        Raises:
            CharacterValidationError: name or class missing, or bad points
        """
        character = Character(name, character_class, attribute_points)
        self._characters.append(character)
        logger.info(
            f"Created {character.name} the {character.character_class} "
            f"with {character.available_attribute_points} attribute points"
        )
        return character

    def assign_skill(self, character_name: str, skill_ordinal: int) -> CommandResult:
        """
        Teach a catalog skill to a character.

        Args:
            character_name: Name of the character (case-insensitive)
            skill_ordinal: 1-based position in the skill catalog

        Returns:
            CommandResult; on failure nothing has changed
        """
        character = self.find_character(character_name)
        if character is None:
            return self._reject(MSG_CHARACTER_NOT_FOUND)

        if not self.catalog.is_valid_ordinal(skill_ordinal):
            return self._reject(MSG_INVALID_SKILL)

        skill = self.catalog.get(skill_ordinal)

        # Duplicate check precedes the cost check
        if character.has_skill(skill.name):
            return self._reject(f"{character.name} already has {skill.name} skills!")

        if not character.can_afford(skill):
            return self._reject(MSG_NOT_ENOUGH_POINTS)

        if not character.try_add_skill(skill):
            return self._reject(MSG_SKILL_FAILED)

        logger.info(
            f"{character.name} learned {skill.name} "
            f"({character.available_attribute_points} points left)"
        )
        return CommandResult(True, f"Skill: {skill.name} added to {character.name}")

    def level_up_character(self, character_name: str) -> CommandResult:
        """Level up a character by name."""
        character = self.find_character(character_name)
        if character is None:
            return self._reject(MSG_CHARACTER_NOT_FOUND)

        character.level_up()
        logger.info(f"{character.name} reached level {character.level}")
        return CommandResult(True, f"{character.name} is now a Level:{character.level} Character.")

    def _reject(self, message: str) -> CommandResult:
        logger.debug(f"Command rejected: {message}")
        return CommandResult(False, message)

    # -------------------------------------------------------------------------
    # QUERIES
    # -------------------------------------------------------------------------

    def find_character(self, name: str) -> Optional[Character]:
        """First character whose name matches, ignoring case."""
        if not isinstance(name, str):
            return None
        wanted = name.lower()
        for character in self._characters:
            if character.name.lower() == wanted:
                return character
        return None

    def list_characters(self) -> Tuple[Character, ...]:
        """All characters in creation order (read-only snapshot)."""
        return tuple(self._characters)

    def list_available_skills(self) -> Tuple[Skill, ...]:
        """The skill catalog in menu order (read-only snapshot)."""
        return self.catalog.entries()

    def render_roster(self) -> str:
        """Every character sheet, framed for the 'display all' screen."""
        return get_sheet_renderer().render_roster(self._characters)

    def render_skill_menu(self) -> str:
        """Numbered skill list used when picking a skill to assign."""
        return get_sheet_renderer().render_skill_menu(self.catalog)


# =============================================================================
# EXCEPTIONS
# Model errors are re-exported so callers only need this module.
# =============================================================================

RosterError = CharacterModelError


# =============================================================================
# NEW ROSTER FACTORY
# =============================================================================

def new_roster(catalog: Optional[SkillCatalog] = None) -> RosterManager:
    """Create an empty roster backed by the built-in skill catalog."""
    return RosterManager(catalog=catalog)


# =============================================================================
# MAIN ENTRY (for testing)
# =============================================================================

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    roster = new_roster()
    roster.create_character("Aria", "Mage", 20)

    for ordinal in (3, 1):
        print(roster.assign_skill("Aria", ordinal).message)
    print(roster.level_up_character("Aria").message)
    print(roster.assign_skill("Aria", 1).message)
    print(roster.render_roster())
