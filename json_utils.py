"""
JSON utilities using orjson for the Text Metrics Engine
=======================================================

Thin wrapper exposing a ``json``-like interface (``dumps``/``loads``/``dump``)
on top of orjson. ``dumps`` returns ``str`` rather than orjson's ``bytes``.
"""

from typing import Any, Callable, Optional

import orjson


def dumps(obj: Any, indent: Optional[int] = None, default: Optional[Callable[[Any], Any]] = None) -> str:
    """
    Serialize obj to a JSON string.

    Args:
        obj: Object to serialize
        indent: Any non-None value pretty-prints with two-space indentation
            (the only indentation orjson supports)
        default: Callable for objects orjson cannot serialize natively

    Returns:
        JSON string
    """
    option = orjson.OPT_NON_STR_KEYS
    if indent is not None:
        option |= orjson.OPT_INDENT_2
    return orjson.dumps(obj, default=default, option=option).decode("utf-8")


def loads(s: Any) -> Any:
    """Deserialize a JSON ``str`` or ``bytes`` document."""
    return orjson.loads(s)


def dump(obj: Any, fp, indent: Optional[int] = None) -> None:
    """Serialize obj and write it to a text file-like object."""
    fp.write(dumps(obj, indent=indent))


JSONDecodeError = orjson.JSONDecodeError
