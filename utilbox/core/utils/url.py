import re
from urllib.parse import parse_qsl, unquote, urlencode


QUERY_PAIR = re.compile(r'[?&][^?&]+=[^?&]+')


class SearchParams:
    """
    Ordered, multi valued query string parameters.

    Keeps every `(key, value)` pair in the order it was given, so repeated
    keys survive a round trip through `str()`.

    ### Usage:

    ```python
    params = SearchParams('?tag=a&tag=b&page=2')
    params.get('tag')      # 'a'
    params.getall('tag')   # ['a', 'b']
    str(params)            # 'tag=a&tag=b&page=2'
    ```

    """

    def __init__(self, init=None):
        self._pairs = []
        if init is None:
            return
        if isinstance(init, str):
            query = init.split('?', 1)[1] if '?' in init else init
            self._pairs = parse_qsl(query, keep_blank_values=True)
        elif isinstance(init, SearchParams):
            self._pairs = list(init.items())
        elif hasattr(init, 'items'):
            self._pairs = [(str(k), str(v)) for k, v in init.items()]
        else:
            self._pairs = [(str(k), str(v)) for k, v in init]

    def get(self, key, default=None):
        for k, v in self._pairs:
            if k == key:
                return v
        return default

    def getall(self, key):
        return [v for k, v in self._pairs if k == key]

    def append(self, key, value):
        self._pairs.append((str(key), str(value)))

    def set(self, key, value):
        """Replace all values of `key` by a single value at its first position."""
        key = str(key)
        pairs = []
        done = False
        for k, v in self._pairs:
            if k != key:
                pairs.append((k, v))
            elif not done:
                pairs.append((k, str(value)))
                done = True
        if not done:
            pairs.append((key, str(value)))
        self._pairs = pairs

    def delete(self, key):
        self._pairs = [(k, v) for k, v in self._pairs if k != key]

    def keys(self):
        seen = []
        for k, _ in self._pairs:
            if k not in seen:
                seen.append(k)
        return seen

    def items(self):
        return list(self._pairs)

    def to_dict(self):
        """Return a plain dict, the last value of a repeated key wins."""
        return dict(self._pairs)

    def __contains__(self, key):
        return any(k == key for k, _ in self._pairs)

    def __iter__(self):
        return iter(self._pairs)

    def __len__(self):
        return len(self._pairs)

    def __eq__(self, other):
        if not isinstance(other, SearchParams):
            return NotImplemented
        return self._pairs == other._pairs

    def __str__(self):
        return urlencode(self._pairs)

    def __repr__(self):
        return f'SearchParams({str(self)!r})'


def url_parse(url):
    """
    Parse the query parameters of an url into a dict.

    ### Args:

    - **url** (str): A full url, a `?query` or a bare `a=b&c=d` string

    ### Returns:

    - **dict**: Percent decoded keys and values, e.g. for `?id=12345&a=b`
      the result is `{'id': '12345', 'a': 'b'}`

    ### Notes:

    1. Only pairs with a non empty key and value are taken
    1. A value may contain further `=` characters, the key ends at the first one
    1. When a key repeats, the last value wins
    1. A string without any `?` is handled as a bare query string

    """
    result = {}
    if not url:
        return result

    if '?' not in url:
        url = '?' + url

    for item in QUERY_PAIR.findall(url):
        key, _, val = item[1:].partition('=')
        result[unquote(key)] = unquote(val)

    return result
