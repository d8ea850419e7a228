"""
Tests for the console shell - driven with scripted input, no terminal
"""

import logging

import pytest
import console
from console import ConsoleShell
from engine import new_roster


class ScriptedIO:
    """Feeds canned answers to input() and records everything shown."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.output = []

    def input(self, prompt=''):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def print(self, text=''):
        self.output.append(text)

    @property
    def text(self):
        return '\n'.join(self.output)


def run_shell(answers, roster=None):
    io = ScriptedIO(answers)
    shell = ConsoleShell(roster=roster or new_roster(), input_func=io.input, output_func=io.print)
    shell.run()
    return shell, io


class TestMainMenu:
    """Test menu dispatch."""

    def test_exit(self):
        """Option 5 leaves after showing the menu once."""
        shell, io = run_shell(['5'])

        assert io.output[0].startswith("Main Menu:")
        assert "5. Exit" in io.output[0]
        assert io.prompts == ["Enter your choice: "]

    def test_end_of_input_exits(self):
        """Closed input ends the loop quietly."""
        _, io = run_shell([])
        assert len(io.output) == 1

    def test_invalid_choice(self):
        """Unknown menu choices are reported."""
        _, io = run_shell(['9', '5'])
        assert "Invalid choice. Please try again." in io.output


class TestCreateCommand:
    """Test menu option 1."""

    def test_create_character(self):
        """Option 1 creates a character from three prompts."""
        shell, io = run_shell(['1', 'Aria', 'Mage', '20', '5'])

        aria = shell.roster.find_character('aria')
        assert aria is not None
        assert aria.hit_points == 20
        assert io.prompts[1:4] == ["Enter name: ", "Enter class: ", "Enter Total Attribute Points: "]

    def test_non_numeric_points(self):
        """Non-numeric points create nothing."""
        shell, io = run_shell(['1', 'Aria', 'Mage', 'lots', '5'])

        assert len(shell.roster) == 0
        assert "Invalid attribute points. Character not created." in io.output

    def test_validation_error_reported(self):
        """Validation errors are shown instead of raised."""
        shell, io = run_shell(['1', '', 'Mage', '10', '5'])

        assert len(shell.roster) == 0
        assert "Character name cannot be empty" in io.output


class TestAssignCommand:
    """Test menu option 2."""

    def test_assign_skill(self):
        """Option 2 shows the balance and catalog, then assigns."""
        roster = new_roster()
        roster.create_character("Aria", "Mage", 20)

        _, io = run_shell(['2', 'aria', '3', '5'], roster=roster)

        assert "\nTotal Attribute Points Available for this character: 20" in io.output
        assert "Available skills:" in io.output
        assert "3. Spellcast - Cast a spell. - Intelligence - Point Requirement:20" in io.text
        assert "Skill: Spellcast added to Aria" in io.output
        assert roster.find_character("Aria").available_attribute_points == 0

    def test_reprompts_until_valid_ordinal(self):
        """Bad picks print the range on their own line and read again."""
        roster = new_roster()
        roster.create_character("Bob", "Warrior", 10)

        _, io = run_shell(['2', 'Bob', 'x', '7', '1', '5'], roster=roster)

        retry = "Invalid selection. Please enter a number in range (1..3):"
        assert io.output.count(retry) == 2
        assert io.prompts[2:] == ["Select a skill to assign: ", "", "", "Enter your choice: "]
        assert "Skill: Strike added to Bob" in io.output

    def test_unknown_character(self):
        """Assigning to an unknown name reports it after the pick."""
        _, io = run_shell(['2', 'Ghost', '1', '5'])

        assert "Character not found!" in io.output
        assert not any("Total Attribute Points" in line for line in io.output)


class TestLevelUpAndDisplay:
    """Test menu options 3 and 4."""

    def test_level_up(self):
        """Option 3 levels up by name."""
        roster = new_roster()
        roster.create_character("Aria", "Mage", 20)

        _, io = run_shell(['3', 'ARIA', '5'], roster=roster)

        assert "Aria is now a Level:2 Character." in io.output

    def test_level_up_unknown(self):
        """Levelling an unknown name is reported."""
        _, io = run_shell(['3', 'Ghost', '5'])
        assert "Character not found!" in io.output

    def test_display_characters(self):
        """Option 4 prints the full roster listing."""
        roster = new_roster()
        roster.create_character("Aria", "Mage", 20)

        _, io = run_shell(['4', '5'], roster=roster)

        assert roster.render_roster() in io.output
        assert "Name: Aria, Class: Mage, Level: 1" in io.text


class TestMain:
    """Test the process entry point."""

    def test_main_configures_logging(self, monkeypatch):
        """main() applies the configured log level."""
        calls = {}
        monkeypatch.setitem(console.CONSOLE_CONFIG, 'log_level', 'debug')
        monkeypatch.setattr(logging, 'basicConfig', lambda **kw: calls.update(kw))
        monkeypatch.setattr('builtins.input', lambda prompt='': '5')
        monkeypatch.setattr('builtins.print', lambda *args, **kw: None)

        console.main()

        assert calls['level'] == logging.DEBUG

    def test_unknown_log_level_falls_back(self, monkeypatch):
        """An unrecognised ROSTER_LOG_LEVEL starts the shell at WARNING."""
        calls = {}
        monkeypatch.setitem(console.CONSOLE_CONFIG, 'log_level', 'verbose')
        monkeypatch.setattr(logging, 'basicConfig', lambda **kw: calls.update(kw))
        monkeypatch.setattr('builtins.input', lambda prompt='': '5')
        monkeypatch.setattr('builtins.print', lambda *args, **kw: None)

        console.main()

        assert calls['level'] == logging.WARNING

    @pytest.mark.parametrize("name,expected", [
        ("debug", logging.DEBUG),
        (" Info ", logging.INFO),
        ("ERROR", logging.ERROR),
        ("loud", logging.WARNING),
    ])
    def test_resolve_log_level(self, name, expected):
        """Level names resolve case-insensitively, unknown names to WARNING."""
        assert console.resolve_log_level(name) == expected


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
