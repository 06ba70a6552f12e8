"""
# SQL-Spans: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

from string import Formatter
from typing import Iterable

from sqlspans.exceptions import TemplateFormatException


def validate_template(template: str) -> str:
    """
    Ensure a render template has exactly one positional replacement field.

    The field must be `{}` or `{0}` (conversions and format specifications are allowed);
    literal braces are written `{{` and `}}`.
    Returns the template unchanged so that it may be validated in place.
    """
    try:
        fields = [
            (field_name, format_specification)
            for _, field_name, format_specification, _ in Formatter().parse(template)
            if field_name is not None
        ]
    except ValueError as value_error:
        raise TemplateFormatException(template) from value_error

    if len(fields) != 1:
        raise TemplateFormatException(template)

    field_name, format_specification = fields[0]
    if field_name not in ('', '0') or '{' in format_specification:
        raise TemplateFormatException(template)

    return template


def fill_template(template: str, string: str) -> str:
    return template.format(string)


def normalise_keywords(keywords: Iterable[str]) -> frozenset[str]:
    return frozenset(keyword.lower() for keyword in keywords)


def normalise_dependency_names(dependency_from_name: dict[str, str]) -> dict[str, str]:
    return {
        name.lower(): replacement
        for name, replacement in dependency_from_name.items()
    }
