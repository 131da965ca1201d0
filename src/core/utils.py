"""
Core Utility Functions.

Common utilities used across the application.
"""

from typing import Any


def format_query_value(value: Any) -> str:
    """
    Render a value the way the image hosts expect it in a query string.

    Booleans are lowercased (``true`` / ``false``); everything else uses
    its plain string form.

    Examples:
        >>> format_query_value(True)
        'true'
        >>> format_query_value(2)
        '2'
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def safe_get(obj: Any, *keys: Any, default: Any = None) -> Any:
    """
    Safely get nested dictionary values.

    Args:
        obj: Dictionary or object
        *keys: Keys to traverse
        default: Default value if key not found

    Returns:
        Value at the nested key path, or default

    Example:
        >>> safe_get({'a': {'b': 1}}, 'a', 'b')
        1
        >>> safe_get({'a': {}}, 'a', 'b', default=0)
        0
    """
    current = obj
    for key in keys:
        if isinstance(current, dict):
            current = current.get(key)
        elif isinstance(key, str) and hasattr(current, key):
            current = getattr(current, key)
        else:
            return default
        if current is None:
            return default
    return current
