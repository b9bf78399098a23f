"""
Utility functions for fieldgraph.

Includes case conversion (camelCase <-> snake_case) used for wire aliases
and for reading camelCase keys from configuration files.
"""

from __future__ import annotations

import re
from typing import Any


# Pre-compiled regex patterns for better performance
_CAMEL_TO_SNAKE_PATTERN = re.compile(r'(?<!^)(?=[A-Z])')
_SNAKE_TO_CAMEL_PATTERN = re.compile(r'_([a-z])')


def to_snake_case(name: str) -> str:
    """
    Convert camelCase to snake_case.

    Examples:
        defaultValue -> default_value
        requiresPermission -> requires_permission
        HTTPResponse -> http_response
    """
    # Handle consecutive uppercase (HTTP -> http)
    result = re.sub(r'([A-Z]+)([A-Z][a-z])', r'\1_\2', name)
    result = _CAMEL_TO_SNAKE_PATTERN.sub('_', result)
    return result.lower()


def to_camel_case(name: str) -> str:
    """
    Convert snake_case to camelCase.

    Examples:
        scalar_fields -> scalarFields
        entity_name -> entityName
    """
    def replace_underscore(match):
        return match.group(1).upper()

    return _SNAKE_TO_CAMEL_PATTERN.sub(replace_underscore, name)


def convert_keys_to_snake(data: Any) -> Any:
    """
    Recursively convert all dict keys from camelCase to snake_case.

    Keys that are already snake_case are left unchanged.
    """
    if isinstance(data, dict):
        return {
            to_snake_case(k): convert_keys_to_snake(v)
            for k, v in data.items()
        }
    elif isinstance(data, list):
        return [convert_keys_to_snake(item) for item in data]
    else:
        return data
