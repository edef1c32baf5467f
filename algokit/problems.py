"""Short number and string puzzles: flips, floors, primes, seating and more."""

from math import isqrt

_MIRRORED = str.maketrans("pq", "qp")


def _flip_alternating(bits, first, last):
    """Flip every bit in ``bits[first:last + 1]`` that starts a new run.

    A position is flipped unless it repeats the character chosen for the
    position before it, in which case it keeps its value and breaks the run.
    """
    previous = None
    for index in range(first, last + 1):
        ch = bits[index]
        if previous == ch:
            previous = "*"
        else:
            previous = ch
            bits[index] = "1" if ch == "0" else "0"


def min_flip_operations(bits):
    """Count the flip operations needed to turn a binary string into zeros.

    Zeros are peeled off both ends; whenever both ends are ``1`` the
    remaining span is flipped run by run, which counts as one operation.
    """
    if set(bits) - {"0", "1"}:
        raise ValueError(f"not a binary string: {bits!r}")
    cells = list(bits)
    first, last = 0, len(cells) - 1
    operations = 0
    while first <= last:
        left, right = cells[first], cells[last]
        if left == "0" and right == "0":
            first += 1
            last -= 1
        elif left == "0":
            first += 1
        elif right == "0":
            last -= 1
        else:
            _flip_alternating(cells, first, last)
            operations += 1
    return operations


def swap_first_letters(a, b):
    """Exchange the first characters of two words."""
    if not a or not b:
        raise ValueError("both words must be non-empty")
    return b[0] + a[1:], a[0] + b[1:]


def cube_pairs(n):
    """Number of ordered pairs of positive integers ``(a, b)`` with ``a + b == n``."""
    return n - 1


def fibonacciness(a, b, c, d):
    """Most Fibonacci steps achievable in ``a, b, ?, c, d`` by choosing ``?``."""
    best = 0
    for middle in (a + b, c - b, d - c):
        sequence = (a, b, middle, c, d)
        hits = sum(
            third == first + second
            for first, second, third in zip(sequence, sequence[1:], sequence[2:])
        )
        best = max(best, hits)
    return best


def floor_number(apartment, per_floor):
    """Floor of an apartment when the first floor holds two and the rest ``per_floor``."""
    if apartment < 1 or per_floor < 1:
        raise ValueError("apartment and per_floor must be positive")
    if apartment <= 2:
        return 1
    return -(-(apartment - 2) // per_floor) + 1


def max_multiple_sum(n):
    """The prime ``x <= n`` whose multiples up to ``n`` have the largest sum.

    Ties go to the smaller prime; for ``n < 2`` the answer is 2.
    """
    best_prime = 2
    best_total = None
    for candidate in range(2, n + 1):
        if not is_prime(candidate):
            continue
        count = n // candidate
        total = (candidate + count * candidate) * count // 2
        if best_total is None or total > best_total:
            best_total = total
            best_prime = candidate
    return best_prime


def mirror_string(s):
    """The string as seen in a mirror: reversed, with ``p`` and ``q`` swapped."""
    return s[::-1].translate(_MIRRORED)


def _smallest_divisor_except(n, excluded):
    for divisor in range(2, isqrt(n) + 1):
        if divisor != excluded and n % divisor == 0:
            return divisor
    return None


def product_of_three(n):
    """Three distinct integers ``a, b, c >= 2`` with ``a * b * c == n``, or ``None``."""
    for first in range(2, isqrt(n) + 1):
        if n % first:
            continue
        rest = n // first
        second = _smallest_divisor_except(rest, first)
        if second is None:
            continue
        third = rest // second
        if third >= 2 and third not in (first, second):
            return first, second, third
    return None


def seat_monkeys(m, a, b, c):
    """Most monkeys seated in two rows of ``m`` seats.

    ``a`` monkeys want row one, ``b`` want row two, ``c`` take any seat.
    """
    if min(m, a, b, c) < 0:
        raise ValueError("counts must not be negative")
    first_row = min(a, m)
    second_row = min(b, m)
    return first_row + second_row + min(c, 2 * m - first_row - second_row)


def can_split_watermelon(n):
    """Whether ``n`` splits into two positive even parts."""
    return n > 2 and n % 2 == 0


def is_prime(n):
    """Primality test by trial division with 6k +/- 1 candidates."""
    if n < 2:
        return False
    if n in (2, 3, 5):
        return True
    if n % 2 == 0 or n % 3 == 0 or n % 5 == 0:
        return False
    k = 6
    while (k - 1) * (k - 1) <= n:
        if n % (k - 1) == 0 or n % (k + 1) == 0:
            return False
        k += 6
    return True