import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext


MOBILE_DIGITS = re.compile(r'\d{11}', re.ASCII)
MOBILE_GROUPS = re.compile(r'(\d{3})(\d{4})(\d{4})', re.ASCII)


def secrecy_mobile(mobile):
    """
    Mask the middle four digits of a mobile number.

    `13888888888` becomes `138****8888`.

    ### Args:

    - **mobile** (any): The phone number, converted with `str()`

    ### Returns:

    - **str**: The masked number, or the unchanged string when it holds no
      run of 11 digits

    """
    mobile = str(mobile)
    if not MOBILE_DIGITS.search(mobile):
        return mobile
    return MOBILE_GROUPS.sub(r'\1****\3', mobile, count=1)


def format_price(value, decimals=2):
    """
    Format a number with thousands separators and fixed decimals.

    Locale independent, always `,` for grouping and `.` for decimals.
    Rounding is half up, so `0.125` becomes `0.13`.

    ### Args:

    - **value** (int|float|Decimal|str): The amount to format
    - **decimals** (int, optional): Number of decimal places. Defaults to 2.

    ### Returns:

    - **str**: The formatted price, e.g. `2,999.00`

    ### Raises:

    - **ValueError**: If the value is not a finite number

    """
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f'Can not format "{value}" as price.')
    if not amount.is_finite():
        raise ValueError(f'Can not format "{value}" as price.')

    # widen precision so large amounts keep all their digits
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + decimals + 2)
        amount = amount.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
        return f'{amount:,.{decimals}f}'


def unit_price(val, unit=None, location=None):
    """
    Format a price with a currency unit.

    ### Args:

    - **val** (int|float|Decimal|str): The amount, falsy values count as 0
    - **unit** (str, optional): Currency unit put in front of the price
    - **location** (str, optional): `before` returns only the integer part,
      `after` only the two decimals, anything else the full price with unit

    ### Returns:

    - **str**: For `2999` and unit `¥` one of `¥2,999.00`, `2,999` or `00`

    """
    if not val:
        val = 0
    price = format_price(val)
    if location == 'before':
        return price[:-3]
    if location == 'after':
        return price[-2:]
    return (unit or '') + price
