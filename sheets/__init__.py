"""
Character sheet templates for Dungeon Crawler Character Management.

Jinja2-based templates for every piece of text the roster shows:
skill lines, character sheets, the skill menu and the main menu.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Any, Optional
from jinja2 import Environment, FileSystemLoader, ChoiceLoader, DictLoader, TemplateNotFound

logger = logging.getLogger(__name__)

# Optional directory of .txt templates overriding the inline defaults
TEMPLATE_DIR_ENV = 'ROSTER_TEMPLATE_DIR'


class SheetRenderer:
    """
    Jinja2-based sheet template engine.

    Templates found in template_dir take precedence over DEFAULT_TEMPLATES.
    """

    def __init__(self, template_dir: Optional[Path] = None):
        if template_dir is None and os.environ.get(TEMPLATE_DIR_ENV):
            template_dir = Path(os.environ[TEMPLATE_DIR_ENV])
        self.template_dir = template_dir

        loaders = [DictLoader(DEFAULT_TEMPLATES)]
        if self.template_dir is not None and self.template_dir.exists():
            loaders.insert(0, FileSystemLoader(str(self.template_dir)))
            logger.debug(f"Sheet templates loaded from {self.template_dir}")

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            trim_blocks=True,
            lstrip_blocks=True,
        )

        # Register custom filters
        self.env.filters['skill_line'] = self._format_skill_line

    def _format_skill_line(self, skill) -> str:
        """Format one skill as 'name - description - attribute - Point Requirement:cost'."""
        return self.render('skill_line.txt', {
            'name': skill.name,
            'description': skill.description,
            'attribute': skill.attribute,
            'required_points': skill.required_points,
        })

    def render(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        try:
            template = self.env.get_template(template_name)
        except TemplateNotFound:
            logger.error(f"Sheet template '{template_name}' not found")
            raise
        return template.render(**context)

    def render_skill(self, skill) -> str:
        return self._format_skill_line(skill)

    def render_skill_menu(self, skills) -> str:
        """Numbered skill list, one '<ordinal>. <skill line>' per entry."""
        return self.render('skill_menu.txt', {'skills': list(skills)})

    def render_character(self, character) -> str:
        return self.render('character_sheet.txt', {
            'name': character.name,
            'character_class': character.character_class,
            'level': character.level,
            'hit_points': character.hit_points,
            'available_attribute_points': character.available_attribute_points,
            'skills': list(character.skills),
        })

    def render_roster(self, characters) -> str:
        return self.render('roster.txt', {
            'sheets': [self.render_character(c) for c in characters],
        })


# =============================================================================
# INLINE TEMPLATES
# Jinja drops the single trailing newline of each template source.
# =============================================================================

DEFAULT_TEMPLATES = {
    'skill_line.txt': (
        '{{ name }} - {{ description }} - {{ attribute }} - '
        'Point Requirement:{{ required_points }}'
    ),

    'skill_menu.txt': '''\
{% for skill in skills %}
{{ loop.index }}. {{ skill | skill_line }}
{% endfor %}
''',

    'character_sheet.txt': '''\
Name: {{ name }}, Class: {{ character_class }}, Level: {{ level }}, HitPoints: {{ hit_points }}, Available Attribute Points: {{ available_attribute_points }}
Skills:
{% for skill in skills %}
{{ skill | skill_line }}
{% else %}
There are no skills assigned yet...!
{% endfor %}
''',

    # Each sheet already ends with a newline
    'roster.txt': '''\
All Characters in the character sheet.......................
{% for sheet in sheets %}
{{ sheet }}
{% endfor %}
End.........................................................

''',

    'main_menu.txt': '''\
Main Menu:
1. Create a character
2. Assign skills
3. Level up a character
4. Display all character sheets
5. Exit
''',
}


# Global renderer instance
_renderer: Optional[SheetRenderer] = None


def get_sheet_renderer() -> SheetRenderer:
    """Get or create the global sheet renderer."""
    global _renderer
    if _renderer is None:
        _renderer = SheetRenderer()
    return _renderer


def render_template(template_name: str, context: Dict[str, Any]) -> str:
    """Convenience function to render a template."""
    return get_sheet_renderer().render(template_name, context)
