from decimal import Decimal

ONES = ["", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine"]
TEENS = ["Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen",
         "Sixteen", "Seventeen", "Eighteen", "Nineteen"]
TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]

CRORE = 10000000
LAKH = 100000
THOUSAND = 1000


def _below_thousand(n):
    words = []
    if n >= 100:
        words.append(ONES[n // 100])
        words.append("Hundred")
        n %= 100
    if n >= 20:
        words.append(TENS[n // 10])
        n %= 10
    elif n >= 10:
        words.append(TEENS[n - 10])
        n = 0
    if n > 0:
        words.append(ONES[n])
    return words


def _indian_words(n):
    words = []
    if n >= CRORE:
        # Counts of crore above 999 are themselves spelled in lakh/thousand
        words.extend(_indian_words(n // CRORE))
        words.append("Crore")
        n %= CRORE
    if n >= LAKH:
        words.extend(_below_thousand(n // LAKH))
        words.append("Lakh")
        n %= LAKH
    if n >= THOUSAND:
        words.extend(_below_thousand(n // THOUSAND))
        words.append("Thousand")
        n %= THOUSAND
    words.extend(_below_thousand(n))
    return words


def number_to_words(amount):
    """Spell the integer part of amount in Indian numbering.

    >>> number_to_words(1050)
    'One Thousand Fifty'
    >>> number_to_words(12345678)
    'One Crore Twenty Three Lakh Forty Five Thousand Six Hundred Seventy Eight'
    """
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    if not value.is_finite() or value < 0:
        raise ValueError(f"Cannot spell {amount!r}: amount must be finite and non-negative")

    integer_part = int(value)
    if integer_part == 0:
        return "Zero"
    return " ".join(_indian_words(integer_part))
