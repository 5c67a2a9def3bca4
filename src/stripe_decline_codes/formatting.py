"""
Message Templates

Placeholders are written ``{{name}}`` where ``name`` is one or more word
characters (letters, digits, underscore). Substitution is a single
left-to-right pass: text inserted for a placeholder is never scanned again,
so a value containing ``{{other}}`` is emitted as-is.
"""
from __future__ import annotations

import re
from typing import Any, Mapping, Optional

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")


def find_placeholders(template: str) -> tuple[str, ...]:
    """
    List the placeholder names in a template.

    Names appear once each, in order of first occurrence.

    Example:
        >>> find_placeholders("Hi {{name}}, see {{url}} ({{name}})")
        ('name', 'url')
    """
    seen: dict[str, None] = {}
    for match in PLACEHOLDER_PATTERN.finditer(template):
        seen.setdefault(match.group(1), None)
    return tuple(seen)


def render_template(template: str, variables: Optional[Mapping[str, Any]] = None) -> str:
    """
    Substitute ``{{name}}`` placeholders.

    Placeholders whose name is not in ``variables`` are left verbatim.
    With no variables the template is returned unchanged.

    Example:
        >>> render_template("Contact {{merchant}} or {{bank}}", {"merchant": "Acme"})
        'Contact Acme or {{bank}}'
    """
    if not variables:
        return template

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in variables:
            return str(variables[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


__all__ = [
    "PLACEHOLDER_PATTERN",
    "find_placeholders",
    "render_template",
]
