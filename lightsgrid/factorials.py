"""Factorial helpers, an iterative and a recursive variant."""


def factorial(n: int) -> int:
    """Return n! by repeated multiplication; values below 1 give 1."""
    result = 1
    while n > 0:
        result *= n
        n -= 1
    return result


def factorial_recursive(n: int) -> int:
    """Return n! recursively; n must not be negative."""
    if n < 0:
        raise ValueError(f"factorial of a negative number: {n}")
    if n == 0:
        return 1
    return n * factorial_recursive(n - 1)