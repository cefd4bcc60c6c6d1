"""Display formatting for prices and Egyptian phone numbers."""

import re

from storefront.i18n import to_arabic_digits

_CURRENCY_SYMBOLS_AR = {"EGP": "ج.م."}


def _group(amount: float) -> str:
    # Up to two fraction digits, none when the amount is whole
    text = f"{amount:,.2f}"
    if text.endswith(".00"):
        return text[:-3]
    return text.rstrip("0")


def format_currency(amount: float, currency: str = "EGP", language: str = "en") -> str:
    """Format a price the way the storefront shows it.

    >>> format_currency(1250)
    'EGP 1,250'
    >>> format_currency(99.5)
    'EGP 99.5'
    """
    text = _group(amount)
    if language == "ar":
        text = to_arabic_digits(text.replace(",", "٬").replace(".", "٫"))
        return f"{text} {_CURRENCY_SYMBOLS_AR.get(currency, currency)}"
    return f"{currency} {text}"


def format_phone_number(value: str) -> str:
    """Normalize user input into the ``+20 XXX XXX XXXX`` display form.

    Non-digits are stripped, then a leading ``20`` country code or a local
    trunk ``0`` is dropped.
    Ten or more digits are truncated to ten and fully grouped; six to nine
    are split after the operator prefix; three to five get the country
    code only; shorter input is returned as bare digits.
    """
    digits = re.sub(r"\D", "", value or "")
    if digits.startswith("20"):
        digits = digits[2:]
    elif digits.startswith("0"):
        digits = digits[1:]

    if len(digits) >= 10:
        digits = digits[:10]
        return f"+20 {digits[:3]} {digits[3:6]} {digits[6:]}"
    if len(digits) >= 6:
        return f"+20 {digits[:3]} {digits[3:]}"
    if len(digits) >= 3:
        return f"+20 {digits}"
    return digits
