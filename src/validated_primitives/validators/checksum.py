"""Checksum algorithms.

This module provides the self-verifying digit algorithms used by the
validator catalogues:

- Luhn (mod 10): credit card numbers
- ISO 13616 mod 97: IBAN
- ABA 3-7-1 weighting: US routing numbers
- EAN/UPC check digit: UPC-A, EAN-13, EAN-8 barcodes

All functions are pure and never raise for malformed input; they return
False (or a sentinel) instead.
"""

from __future__ import annotations

from validated_primitives.validators.base import is_ascii_digits

_ABA_WEIGHTS = (3, 7, 1, 3, 7, 1, 3, 7, 1)


def luhn_checksum(digits: list[int]) -> int:
    """Calculate Luhn checksum.

    Every second digit from the right is doubled, subtracting 9 when the
    product exceeds 9.

    Args:
        digits: List of digits

    Returns:
        Checksum value (0 if valid)
    """
    total = 0
    for i, digit in enumerate(reversed(digits)):
        if i % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10


def is_luhn_valid(number: str) -> bool:
    """Validate a digit string with the Luhn algorithm.

    An empty string passes the arithmetic (sum 0); length rules are a
    separate concern.
    """
    if number and not is_ascii_digits(number):
        return False
    return luhn_checksum([int(d) for d in number]) == 0


def luhn_check_digit(prefix: str) -> int:
    """Return the digit that makes ``prefix + digit`` Luhn-valid."""
    checksum = luhn_checksum([int(d) for d in prefix] + [0])
    return (10 - checksum) % 10


def iban_remainder(iban: str) -> int:
    """Compute the ISO 13616 mod 97 remainder of an IBAN.

    The first four characters move to the end, letters map to 10..35 and
    the remainder is accumulated one digit at a time.

    Args:
        iban: Normalized IBAN (uppercase, no separators)

    Returns:
        Remainder, or -1 if the value contains characters outside A-Z0-9
    """
    rearranged = iban[4:] + iban[:4]
    remainder = 0
    for char in rearranged:
        if "0" <= char <= "9":
            numeral = char
        elif "A" <= char <= "Z":
            numeral = str(ord(char) - ord("A") + 10)
        else:
            return -1
        for digit in numeral:
            remainder = (remainder * 10 + int(digit)) % 97
    return remainder


def is_iban_checksum_valid(iban: str) -> bool:
    """Check the IBAN mod 97 checksum (remainder must be 1)."""
    if len(iban) < 4:
        return False
    return iban_remainder(iban) == 1


def is_aba_checksum_valid(digits: str) -> bool:
    """Check an ABA routing number.

    Valid iff 3*(d1+d4+d7) + 7*(d2+d5+d8) + (d3+d6+d9) is divisible by 10.
    """
    if len(digits) != 9 or not is_ascii_digits(digits):
        return False
    total = sum(int(d) * w for d, w in zip(digits, _ABA_WEIGHTS))
    return total % 10 == 0


def gtin_check_digit(body: str) -> int:
    """Check digit for the data digits of a UPC/EAN code.

    Odd 1-indexed positions weigh 3, even positions weigh 1.
    """
    total = 0
    for i, char in enumerate(body):
        multiplier = 3 if (i + 1) % 2 == 1 else 1
        total += int(char) * multiplier
    return (10 - (total % 10)) % 10


def is_gtin_checksum_valid(number: str, length: int) -> bool:
    """Validate a UPC-A (12), EAN-13 (13) or EAN-8 (8) code of ``length`` digits."""
    if len(number) != length or not is_ascii_digits(number):
        return False
    return gtin_check_digit(number[:-1]) == int(number[-1])
