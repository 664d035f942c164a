"""
Triangular indexing of (degree, order) pairs.
"""


def required_count(l: int, m: int) -> int:
    """
    Number of coefficient pairs (i, j) with 0 <= i <= l and 0 <= j <= min(i, m).

    **Example**:

        required_count(2, 2)  # (0,0) (1,0) (1,1) (2,0) (2,1) (2,2)
        # Output: 6
        required_count(2, 0)  # (0,0) (1,0) (2,0)
        # Output: 3
    """
    if l == m:
        n = l + 1
        return (n * (n - 1)) // 2 + n

    return sum(min(i, m) + 1 for i in range(l + 1))


def is_valid_index(l: int, m: int) -> bool:
    """True if 0 <= m <= l."""
    return 0 <= m <= l


def contains(l: int, m: int, max_degree: int, max_order: int) -> bool:
    """True if (l, m) is a valid pair inside the (max_degree, max_order) window."""
    return is_valid_index(l, m) and l <= max_degree and m <= max_order
