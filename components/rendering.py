"""
Rendering Module - Jinja2 environment for component templates

Components render outside of any Flask request, so they get their own
environment instead of app.jinja_env. Output is always autoescaped Markup.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from .icons import render_icon
from .styles import style

TEMPLATES_DIR = Path(__file__).resolve().parent / 'templates'

jinja_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(['html', 'xml']),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)
jinja_env.globals.update(icon=render_icon, style=style)


def render_component(template_name: str, **context) -> Markup:
    """Render a component template to Markup"""
    template = jinja_env.get_template(template_name)
    return Markup(template.render(**context))
