from .base import ValueKind, kind_of


def for_each(obj, fn):
    """
    Call a visitor for every element of a sequence or every key of a mapping.

    - For sequences: `fn(element, index, sequence)` in index order
    - For mappings: `fn(value, key, mapping)` in the mapping's key order
    - Any other value is wrapped into a one element list first

    ### Args:

    - **obj** (any): The sequence, mapping or scalar to traverse
    - **fn** (callable): The visitor called with three positional arguments

    ### Notes:

    : Nothing happens when `obj` is None. Exceptions raised by the visitor
      are not caught and stop the traversal.

    """
    kind = kind_of(obj)
    if kind is ValueKind.ABSENT:
        return

    if kind not in (ValueKind.SEQUENCE, ValueKind.MAPPING):
        obj = [obj]
        kind = ValueKind.SEQUENCE

    if kind is ValueKind.SEQUENCE:
        for index, element in enumerate(obj):
            fn(element, index, obj)
    else:
        for key in list(obj.keys()):
            # keys removed by the visitor are skipped
            if key in obj:
                fn(obj[key], key, obj)


def merge_all(objs):
    """
    Deep merge an iterable of mappings into a new dictionary.

    Arguments are processed left to right, and each key is handled like this:

    - Both the merged value and the incoming value are mappings: they are
      merged recursively into a new dict
    - Only the incoming value is a mapping: it is deep cloned
    - Otherwise the incoming value replaces the merged value

    ### Args:

    - **objs** (iterable): The mappings to merge, None entries are skipped

    ### Returns:

    - **dict**: A new dict which shares no nested mapping with the inputs

    ### Notes:

    : Lists and tuples are not merged element by element, they are stored
      by reference and the last one wins. A non-mapping argument is merged
      under its integer index, e.g. `merge_all([5]) == {0: 5}`.

    """
    result = {}

    def assign_value(val, key, _container):
        if kind_of(val) is ValueKind.MAPPING:
            if kind_of(result.get(key)) is ValueKind.MAPPING:
                result[key] = merge_all((result[key], val))
            else:
                result[key] = merge_all(({}, val))
        else:
            result[key] = val

    for obj in objs:
        for_each(obj, assign_value)

    return result


def deep_merge(*objs):
    """
    Deep merge any number of mappings into a new dictionary.

    Variadic shortcut for `merge_all()`, no argument is modified.

    ```python
    deep_merge({'db': {'host': 'a', 'port': 1}}, {'db': {'host': 'b'}})
    # {'db': {'host': 'b', 'port': 1}}
    ```

    """
    return merge_all(objs)
