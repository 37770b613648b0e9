"""
Invocation parameter policy.

Decides which invocation parameters are source query data and which are
platform metadata, environment-style settings or query-builder
directives. Each rule is a plain predicate; collect_query_params()
applies them in sequence.
"""

import re
from typing import Any, Iterable, List, Mapping, Tuple
from urllib.parse import quote

# Platform-reserved fields
RESERVED_PREFIX = "__ow_"
PATH_PARAM = "__ow_path"
QUERY_PARAM = "__ow_query"
METHOD_PARAM = "__ow_method"

# User-facing fields
SOURCE_PARAM = "src"
API_PARAM = "api"
QUERY_BUILDER_PREFIX = "hlx_"

# e.g. LOG_LEVEL, AWS_REGION
PLATFORM_KEY_PATTERN = re.compile(r"^[A-Z]+_[A-Z]+")

# Characters left literal in a reconstructed query string
_QUERY_SAFE = "!'()*"


def is_platform_key(key: str) -> bool:
    """Uppercase-with-underscore keys are deployment settings."""
    return bool(PLATFORM_KEY_PATTERN.match(key))


def is_reserved_key(key: str) -> bool:
    return key.startswith(RESERVED_PREFIX)


def is_query_builder_key(key: str) -> bool:
    return key.startswith(QUERY_BUILDER_PREFIX)


def is_control_key(key: str) -> bool:
    return key in (API_PARAM, SOURCE_PARAM)


def is_query_param(key: str) -> bool:
    """True if the parameter belongs in the reconstructed query."""
    return not (
        is_platform_key(key) or is_control_key(key) or is_reserved_key(key)
    )


def stringify_value(value: Any) -> str:
    """Render a parameter value the way it appears in a URL."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(stringify_value(item) for item in value)
    return str(value)


def url_param_value(value: Any) -> str:
    """Render a value appended to the source URL; a bare None is "null"."""
    if value is None:
        return "null"
    return stringify_value(value)


def collect_query_params(params: Mapping[str, Any]) -> List[Tuple[str, Any]]:
    """Return the (key, value) pairs of params that are query data."""
    return [(key, value) for key, value in params.items() if is_query_param(key)]


def build_query_string(pairs: Iterable[Tuple[str, Any]]) -> str:
    """
    Serialize pairs into a single encoded query string.

    List and tuple values repeat their key once per item.
    """
    parts = []
    for key, value in pairs:
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            parts.append(
                f"{quote(str(key), safe=_QUERY_SAFE)}="
                f"{quote(stringify_value(item), safe=_QUERY_SAFE)}"
            )
    return "&".join(parts)
