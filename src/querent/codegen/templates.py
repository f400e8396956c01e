"""Jinja2 environment for generated Kotlin, XML and properties files.

Templates live in ``codegen/templates/`` next to this module. XML templates
(``*.xml.j2``) are autoescaped; Kotlin and properties templates are not, and
use the :func:`kotlin_string` filter for string literals instead.
"""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


TEMPLATE_DIR = Path(__file__).parent / "templates"
"""Path to the Jinja2 template directory (``codegen/templates/``)."""

_KOTLIN_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "$": "\\$",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def kotlin_string(value: Optional[Any]) -> str:
    """Render *value* as a Kotlin string literal, or ``null`` for ``None``."""
    if value is None:
        return "null"
    escaped = "".join(_KOTLIN_ESCAPES.get(ch, ch) for ch in str(value))
    return f'"{escaped}"'


_KOTLIN_HARD_KEYWORDS = frozenset(
    {
        "as", "break", "class", "continue", "do", "else", "false", "for", "fun",
        "if", "in", "interface", "is", "null", "object", "package", "return",
        "super", "this", "throw", "true", "try", "typealias", "typeof", "val",
        "var", "when", "while",
    }
)


def kotlin_package(package_name: str) -> str:
    """Render a package name, backtick-quoting segments that are Kotlin keywords."""
    return ".".join(
        f"`{segment}`" if segment in _KOTLIN_HARD_KEYWORDS else segment
        for segment in package_name.split(".")
    )


def kotlin_bool(value: bool) -> str:
    """Render a Python bool as a Kotlin boolean literal."""
    return "true" if value else "false"


@functools.lru_cache(maxsize=1)
def create_environment() -> Environment:
    """Create the shared template environment.

    Undefined variables raise instead of rendering as empty strings, and
    block trimming keeps control tags from leaving blank lines behind.
    """
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(enabled_extensions=("xml.j2",), default=False),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["kotlin_string"] = kotlin_string
    env.filters["kotlin_bool"] = kotlin_bool
    env.filters["kotlin_package"] = kotlin_package
    return env


def render_template(name: str, **context: Any) -> str:
    """Render the template *name* with *context*."""
    return create_environment().get_template(name).render(**context)
