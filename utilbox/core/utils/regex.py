"""
Validation patterns for common form input.

The patterns are kept character for character as they are used by the
existing frontend validation rules, only compiled with `re.ASCII` so that
`\\w` and `\\d` match ASCII characters like they do in the browser.

### Patterns:

- **MOBILE**: mainland china mobile number, optional leading 0
- **EMAIL**: email address
- **PASSWORD**: 6 to 20 letters, digits or `@!#$%^&*.~,`
- **INTEGER**: positive integer without zero
- **INTEGER_WITH_ZERO**: positive integer including zero
- **MONEY**: amount with at most two decimals
- **TAX_ID**: taxpayer identification number
- **ID_CARD**: 15 or 18 digit identity card number
- **USER_NAME**: account name of chinese characters, letters, digits, `-` and `_`
- **URL**: http, https or ftp url
- **TEL**: landline number with area code, e.g. `010-12345678`
- **LICENSE_NUM**: business license number

"""

import re
from ..exc import UtilBoxError


MOBILE = re.compile(r'^0?(13[0-9]|14[0-9]|15[0-9]|16[0-9]|17[0-9]|18[0-9]|19[0-9])[0-9]{8}$', re.ASCII)

EMAIL = re.compile(r'^\w+([-+.]\w+)*@\w+([-.]\w+)*\.\w+([-.]\w+)*$', re.ASCII)

PASSWORD = re.compile(r'^[@A-Za-z0-9!#$%^&*.~,]{6,20}$', re.ASCII)

INTEGER = re.compile(r'^[1-9]\d*$', re.ASCII)

INTEGER_WITH_ZERO = re.compile(r'^[0-9]\d*$', re.ASCII)

MONEY = re.compile(r'(^[1-9]([0-9]+)?(\.[0-9]{1,2})?$)|(^(0){1}$)|(^[0-9]\.[0-9]([0-9])?$)', re.ASCII)

TAX_ID = re.compile(r'^((\d{6}[0-9A-Z]{9})|([0-9A-Za-z]{2}\d{6}[0-9A-Za-z]{10,12}))$', re.ASCII)

ID_CARD = re.compile(r'(^\d{15}$)|(^\d{18}$)|(^\d{17}(\d|X|x)$)', re.ASCII)

USER_NAME = re.compile(r'[A-Za-z0-9_\-\u4e00-\u9fa5]$', re.ASCII)

URL = re.compile(
    r"^(https?|ftp):\/\/([a-zA-Z0-9.-]+(:[a-zA-Z0-9.&%$-]+)*@)*"
    r"((25[0-5]|2[0-4][0-9]|1[0-9]{2}|[1-9][0-9]?)(\.(25[0-5]|2[0-4][0-9]|1[0-9]{2}|[1-9]?[0-9])){3}"
    r"|([a-zA-Z0-9-]+\.)*[a-zA-Z0-9-]+\."
    r"(com|edu|gov|int|mil|net|org|biz|arpa|info|name|pro|aero|coop|museum|[a-zA-Z]{2}))"
    r"(:[0-9]+)*(\/($|[a-zA-Z0-9.,?'\\+&%$#=~_-]+))*$",
    re.ASCII,
)

TEL = re.compile(r'0\d{2,3}-\d{7,8}', re.ASCII)

LICENSE_NUM = re.compile(r'(^(?:(?![IOZSV])[\dA-Z]){2}\d{6}(?:(?![IOZSV])[\dA-Z]){10}$)|(^\d{15}$)', re.ASCII)


PATTERNS = dict(
    mobile=MOBILE,
    email=EMAIL,
    password=PASSWORD,
    integer=INTEGER,
    integer_with_zero=INTEGER_WITH_ZERO,
    money=MONEY,
    tax_id=TAX_ID,
    id_card=ID_CARD,
    user_name=USER_NAME,
    url=URL,
    tel=TEL,
    license_num=LICENSE_NUM,
)


def get_pattern(rule):
    """
    Resolve a validation rule to its compiled pattern.

    ### Args:

    - **rule** (str|re.Pattern): A rule name from `PATTERNS` (case and `-`
      insensitive) or an already compiled pattern

    ### Returns:

    - **re.Pattern**: The compiled pattern

    ### Raises:

    - **UtilBoxError**: If the rule name is unknown

    """
    if isinstance(rule, re.Pattern):
        return rule
    name = str(rule).strip().lower().replace('-', '_')
    if name not in PATTERNS:
        raise UtilBoxError(f'Unknown validation rule "{rule}", use one of: {", ".join(PATTERNS)}')
    return PATTERNS[name]


def is_valid(rule, value):
    """
    Test a value against a validation rule.

    The value is converted with `str()` and searched, not fully matched, so
    the anchors of each pattern decide how strict the rule is.

    ### Args:

    - **rule** (str|re.Pattern): Rule name or compiled pattern
    - **value** (any): The value to test

    ### Returns:

    - **bool**: True if the pattern is found in the value

    """
    return get_pattern(rule).search(str(value)) is not None
