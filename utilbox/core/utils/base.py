"""
Runtime type predicates for the utilbox helpers.

Every predicate asks `kind_of()` for the kind of a value instead of testing
types ad hoc, so traversal, merging and the `is_*` checks agree on what a
sequence or a mapping is.

"""

import datetime
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from .url import SearchParams


SCALAR_TYPES = (str, bytes, int, float, complex, bool, Decimal)


class ValueKind(Enum):
    """
    Classification of a value as seen by the utilbox helpers.

    ### Members:

    - **ABSENT**: `None`
    - **SEQUENCE**: `list` or `tuple`
    - **MAPPING**: any `collections.abc.Mapping`
    - **DATE**: `datetime.date` and `datetime.datetime`
    - **SCALAR**: strings, bytes, numbers and booleans
    - **OBJECT**: everything else (sets, class instances, callables ...)

    """

    ABSENT = 'absent'
    SEQUENCE = 'sequence'
    MAPPING = 'mapping'
    DATE = 'date'
    SCALAR = 'scalar'
    OBJECT = 'object'


def kind_of(value):
    """
    Determine the `ValueKind` of a value.

    ### Args:

    - **value** (any): The value to classify

    ### Returns:

    - **ValueKind**: The kind of the value

    ### Notes:

    : `bool` is checked as scalar before any container test, and `str` is a
      scalar even though it is iterable.

    """
    if value is None:
        return ValueKind.ABSENT
    if isinstance(value, SCALAR_TYPES):
        return ValueKind.SCALAR
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, datetime.date):
        return ValueKind.DATE
    return ValueKind.OBJECT


def is_array(val):
    """
    Check if a value is a sequence (`list` or `tuple`).

    ### Args:

    - **val** (any): The value to test

    ### Returns:

    - **bool**: True if the value is a sequence, False otherwise

    """
    return kind_of(val) is ValueKind.SEQUENCE


def is_object(val):
    """
    Check if a value is a non-scalar object.

    Sequences, mappings, dates and arbitrary instances count as objects,
    `None` and scalars do not.

    ### Args:

    - **val** (any): The value to test

    ### Returns:

    - **bool**: True if the value is not None and not a scalar

    """
    return kind_of(val) not in (ValueKind.ABSENT, ValueKind.SCALAR)


def is_date(val):
    """
    Check if a value is a date or datetime.

    ### Args:

    - **val** (any): The value to test

    ### Returns:

    - **bool**: True if the value is a `datetime.date` instance

    """
    return kind_of(val) is ValueKind.DATE


def is_url_search_params(val):
    """
    Check if a value is a `SearchParams` instance.

    ### Args:

    - **val** (any): The value to test

    ### Returns:

    - **bool**: True if the value is a `utilbox.core.utils.url.SearchParams`

    """
    return isinstance(val, SearchParams)


def is_boolean(val):
    """
    Check if a value is a boolean.

    ### Args:

    - **val** (any): The value to test

    ### Returns:

    - **bool**: True only for `True` and `False`, never for `0` or `1`

    """
    return isinstance(val, bool)


def is_plain_object(val):
    """
    Check if a value is a plain dictionary.

    Other mappings (for example a `SearchParams` or a read-only
    `MappingProxyType`) are not plain objects.

    ### Args:

    - **val** (any): The value to test

    ### Returns:

    - **bool**: True if the value is a `dict` instance

    """
    return isinstance(val, dict)
