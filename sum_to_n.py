"""Three ways to compute the triangular number 1 + 2 + ... + n.

All functions return 0 for ``n <= 0``.
"""


def sum_to_n_a(n: int) -> int:
    """Iterative sum. O(n) time, O(1) space."""
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def sum_to_n_b(n: int) -> int:
    """Recursive sum. O(n) time and stack depth.

    Raises RecursionError once ``n`` approaches ``sys.getrecursionlimit()``.
    """
    if n <= 0:
        return 0
    return n + sum_to_n_b(n - 1)


def sum_to_n_c(n: int) -> int:
    """Closed formula n(n + 1)/2. O(1)."""
    if n <= 0:
        return 0
    return n * (n + 1) // 2


if __name__ == "__main__":
    for fn in (sum_to_n_a, sum_to_n_b, sum_to_n_c):
        print(f"{fn.__name__}(5) = {fn(5)}")
