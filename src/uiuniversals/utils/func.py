import math
import re
from typing import Callable, Iterable

from uiuniversals.types import V_T

########################## Misc #########################


def noop(*args, **kws):
    """A no operation function"""
    return None


def in_bounds(x: float, lower: float, upper: float) -> float:
    """
    Make `x` be between lower and upper
    """
    upper = max(lower, upper)
    x = max(lower, x)
    x = min(upper, x)
    return x


def not_neg(x: float):
    """
    return the maximum of x and 0
    """
    return max(0, x)


def count_all(__iterable: Iterable[V_T], query: Callable[[V_T], bool]) -> int:
    """
    Counts the elements of the iterable that are accepted by the query
    """
    return sum(1 for x in __iterable if query(x))


########################## Numbers #########################


def round_to(x: float, digits: int) -> float:
    """
    Rounds `x` down to the given number of decimal places.

    `round_to(3.14159, 2) == 3.14` and `round_to(2.999, 1) == 2.9`
    """
    factor = 10**digits
    return math.floor(x * factor) / factor


phone_mask = "+X (XXX) XXX-XXXX"


def format_phone_number(number: int | str) -> str:
    """
    Formats the digits of number with the mask +X (XXX) XXX-XXXX.
    Stops as soon as the digits run out.
    """
    digits = re.sub(r"[^0-9]", "", str(number))
    result = []
    index = 0
    for ch in phone_mask:
        if index >= len(digits):
            break
        if ch == "X":
            result.append(digits[index])
            index += 1
        else:
            result.append(ch)
    return "".join(result)


########################## Strings #########################


def remove_first(s: str, char: str) -> str:
    """
    Removes the first occurrence of char. If there is none, `s` is returned unchanged
    """
    index = s.find(char)
    if index == -1:
        return s
    return s[:index] + s[index + 1 :]


def remove_non_numbers(s: str) -> str:
    """
    Removes all characters that are not digits or a period
    """
    return "".join(c for c in s if c in "0123456789.")
