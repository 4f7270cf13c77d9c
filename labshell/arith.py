"""Small integer exercises: sums, powers, recurrences, divisors and friends."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

PRIME = "PIERWSZA"
COMPOSITE = "ZLOZONA"


def add(a: int, b: int) -> int:
    """Return the sum of two integers."""
    return a + b


def absolute(a: int) -> int:
    """Return the absolute value of an integer."""
    return -a if a < 0 else a


def box_surface(a: int, b: int, c: int) -> int:
    """Return the surface area of a cuboid with edges a, b and c."""
    return 2 * a * b + 2 * b * c + 2 * a * c


def power(a: int, n: int) -> int:
    """Return a multiplied by itself n times; 1 when n is not positive."""
    return a**n if n > 0 else 1


def factorial(n: int) -> int:
    """Return n! for a non-negative n."""
    if n < 0:
        raise ValueError("factorial is defined for non-negative integers only")
    return math.factorial(n)


def step_product(n: int, k: int) -> int:
    """Return n * (n-k) * (n-2k) * ... over the terms that are at least k."""
    if k <= 0:
        raise ValueError("step must be positive")
    result = 1
    while n >= k:
        result *= n
        n -= k
    return result


def recurrence(n: int) -> int:
    """Return f(n) where f(0)=f(1)=f(2)=1 and f(n)=2*f(n-3)+f(n-1)."""
    if n < 0:
        raise ValueError("recurrence is defined for non-negative integers only")
    back3, back2, back1 = 1, 1, 1
    for _ in range(3, n + 1):
        back3, back2, back1 = back2, back1, 2 * back3 + back1
    return back1


def classify_prime(n: int) -> str | None:
    """Return PIERWSZA for a prime, ZLOZONA for a composite and None below 2."""
    if n < 2:
        return None
    if any(n % j == 0 for j in range(2, math.isqrt(n) + 1)):
        return COMPOSITE
    return PRIME


def is_perfect(n: int) -> bool:
    """Tell whether n equals the sum of its divisors smaller than itself."""
    return sum(i for i in range(1, n) if n % i == 0) == n


def reversed_digits(n: int) -> str:
    """Return the decimal digits of n from last to first; empty when n <= 0."""
    return str(n)[::-1] if n > 0 else ""


def _c_mod(x: int, y: int) -> int:
    remainder = abs(x) % abs(y)
    return -remainder if x < 0 else remainder


def gcd(x: int, y: int) -> int:
    """Return the greatest common divisor found by Euclid's algorithm."""
    while y != 0:
        x, y = y, _c_mod(x, y)
    return x


def gcd_sum(values: Iterable[int]) -> int:
    """Sum the gcd of the two latest numbers each time a 1 is read; stop at 0."""
    latest, previous = 1, 1
    total = 0
    for value in values:
        if value == 0:
            break
        if value == 1:
            total += gcd(latest, previous)
        else:
            previous, latest = latest, value
    return total


def collatz(x: int) -> tuple[int, int, int]:
    """Walk the Collatz path down to 1; return (halvings, triplings, steps)."""
    if x <= 0:
        raise ValueError("the Collatz path starts from a positive integer")
    halvings = triplings = 0
    while x != 1:
        if x % 2 == 0:
            halvings += 1
            x //= 2
        else:
            triplings += 1
            x = 3 * x + 1
    return halvings, triplings, halvings + triplings


def collatz_verdict(x: int) -> str:
    """Return 'TAK <halvings> <triplings>' for paths of at most 15 steps, else 'NIE'."""
    halvings, triplings, steps = collatz(x)
    if steps <= 15:
        return f"TAK {halvings} {triplings}"
    return "NIE"


def divisor_count(candidate: int, divisors: Iterable[int]) -> int:
    """Count how many of the divisors divide the candidate."""
    return sum(1 for d in divisors if candidate % d == 0)


def distance_to_range(a: int, b: int, x: int) -> int:
    """Return how far x lies outside [a, b]; 0 (a BINGO) when it lies inside."""
    if a <= x <= b:
        return 0
    if x < a:
        return a - x
    return x - b


def earlier_date(first: Sequence[int], second: Sequence[int]) -> tuple[int, ...]:
    """Return the earlier of two (year, month, day) dates."""
    first, second = tuple(first), tuple(second)
    return first if first < second else second


def big_boom(x: int) -> str:
    """Return the 'BIG BOOM!' shout stretched by x."""
    return "B" + "I" * x + "G B" + "O" * x + "M" + "!" * x