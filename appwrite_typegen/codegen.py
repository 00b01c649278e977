import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    select_autoescape,
)

from .domain.naming import doc_text, ts_single_quoted, ts_string


logger = logging.getLogger(__name__)

# Define the path to the templates directory relative to this file
TEMPLATE_DIR = Path(__file__).parent / "templates"


def setup_jinja_env() -> Environment:
    """Sets up and returns the Jinja2 environment."""
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        # Generated TypeScript must never be HTML-escaped
        autoescape=select_autoescape(["html", "xml"], default_for_string=False),
        trim_blocks=True,  # Remove first newline after a block tag
        lstrip_blocks=True,  # Strip leading whitespace from lines with block tags
        undefined=StrictUndefined,
    )
    env.filters["ts_string"] = ts_string
    env.filters["ts_single_quoted"] = ts_single_quoted
    env.filters["doc"] = doc_text
    return env


@lru_cache(maxsize=1)
def get_jinja_env() -> Environment:
    """Shared environment; templates are read-only so one instance is enough."""
    return setup_jinja_env()


def render_template(template_name: str, context: Dict[str, Any]) -> str:
    """Renders a Jinja template to a string."""
    try:
        template = get_jinja_env().get_template(template_name)
        return template.render(context)
    except Exception as e:
        logger.error(f"Error rendering template '{template_name}': {e}")
        raise
