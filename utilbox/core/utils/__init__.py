from .base import (  # noqa: F401
    ValueKind,
    kind_of,
    is_array,
    is_object,
    is_date,
    is_url_search_params,
    is_boolean,
    is_plain_object,
)
from .dict import for_each, merge_all, deep_merge  # noqa: F401
from .url import SearchParams, url_parse  # noqa: F401
from .format import secrecy_mobile, format_price, unit_price  # noqa: F401
from .regex import PATTERNS, get_pattern, is_valid  # noqa: F401
