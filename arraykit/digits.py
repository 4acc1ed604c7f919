"""Digit-level checks on integers."""


def is_palindrome(number: int) -> bool:
    """Return True if the decimal digits of number read the same both ways."""
    if number < 0 or (number % 10 == 0 and number != 0):
        return False
    reversed_half = 0
    while number > reversed_half:
        number, digit = divmod(number, 10)
        reversed_half = reversed_half * 10 + digit
    return number == reversed_half or number == reversed_half // 10