"""
Console shell for Dungeon Crawler Character Management.

Reads menu choices, parses input, and prints the roster's replies.
All rules live in engine.py; this module only does text in and text out.
"""

import logging
import os
from typing import Callable, Dict, Any, Optional

from engine import RosterManager, CharacterValidationError, new_roster
from sheets import render_template

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================

CONSOLE_CONFIG: Dict[str, Any] = {
    'log_level': os.environ.get('ROSTER_LOG_LEVEL', 'WARNING'),
    'choice_prompt': 'Enter your choice: ',
}


class ConsoleShell:
    """
    Interactive menu loop over a RosterManager.

    input_func and output_func default to input() and print() and can be
    swapped out to drive the menu from tests.
    """

    def __init__(
        self,
        roster: Optional[RosterManager] = None,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
    ):
        self.roster = roster if roster is not None else new_roster()
        self._input = input_func or input
        self._output = output_func or print
        self._handlers = {
            '1': self.handle_create_character,
            '2': self.handle_assign_skill,
            '3': self.handle_level_up,
            '4': self.display_characters,
        }

    def run(self):
        """Show the main menu until the player exits or input runs out."""
        while True:
            self._output(render_template('main_menu.txt', {}))
            try:
                choice = self._input(CONSOLE_CONFIG['choice_prompt']).strip()
            except EOFError:
                logger.debug("Input closed, leaving main menu")
                return

            if choice == '5':
                return

            handler = self._handlers.get(choice)
            if handler is None:
                self._output("Invalid choice. Please try again.")
                continue

            try:
                handler()
            except EOFError:
                logger.debug("Input closed mid-command, leaving main menu")
                return

    # -------------------------------------------------------------------------
    # MENU COMMANDS
    # -------------------------------------------------------------------------

    def handle_create_character(self):
        name = self._input("Enter name: ")
        character_class = self._input("Enter class: ")
        raw_points = self._input("Enter Total Attribute Points: ")

        try:
            points = int(raw_points.strip())
        except ValueError:
            self._output("Invalid attribute points. Character not created.")
            return

        try:
            self.roster.create_character(name, character_class, points)
        except CharacterValidationError as e:
            self._output(str(e))

    def handle_assign_skill(self):
        name = self._input("Enter character name: ")

        character = self.roster.find_character(name)
        if character is not None:
            self._output(
                f"\nTotal Attribute Points Available for this character: "
                f"{character.available_attribute_points}"
            )

        if len(self.roster.catalog) == 0:
            self._output("There are no skills to assign.")
            return

        self._output("Available skills:")
        self._output(self.roster.render_skill_menu().rstrip('\n'))

        ordinal = self._read_skill_ordinal()
        self._output(self.roster.assign_skill(name, ordinal).message)

    def _read_skill_ordinal(self) -> int:
        """Keep asking until the player picks a number shown in the skill list."""
        catalog = self.roster.catalog
        prompt = "Select a skill to assign: "
        while True:
            raw = self._input(prompt)
            try:
                ordinal = int(raw.strip())
            except ValueError:
                ordinal = None
            if ordinal is not None and catalog.is_valid_ordinal(ordinal):
                return ordinal
            self._output(f"Invalid selection. Please enter a number in range (1..{len(catalog)}):")
            prompt = ""

    def handle_level_up(self):
        name = self._input("Enter character name: ")
        self._output(self.roster.level_up_character(name).message)

    def display_characters(self):
        self._output(self.roster.render_roster())


def resolve_log_level(name) -> int:
    """Map a level name like 'debug' to its number; unknown names fall back to WARNING."""
    level = logging.getLevelName(str(name).strip().upper())
    if isinstance(level, int):
        return level
    logger.warning(f"Unknown log level {name!r}, using WARNING")
    return logging.WARNING


def main():
    """Process entry point."""
    logging.basicConfig(level=resolve_log_level(CONSOLE_CONFIG['log_level']))
    ConsoleShell().run()


if __name__ == "__main__":
    main()
