"""Array windows, maze path enumeration and a shrinking-row pattern."""

_MOVES = (("R", 1, 0), ("L", -1, 0), ("U", 0, -1), ("D", 0, 1))


def max_window_sum(nums, k):
    """Largest sum of ``k`` consecutive elements."""
    values = list(nums)
    if not 1 <= k <= len(values):
        raise ValueError("window size must be between 1 and the length of nums")
    window = sum(values[:k])
    best = window
    for leaving, entering in zip(values, values[k:]):
        window += entering - leaving
        best = max(best, window)
    return best


def longest_subarray_at_most(nums, k):
    """Length of the longest contiguous run of non-negative values summing to at most ``k``."""
    values = list(nums)
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    total = 0
    left = 0
    best = 0
    for right, value in enumerate(values):
        total += value
        while total > k and left <= right:
            total -= values[left]
            left += 1
        best = max(best, right - left + 1)
    return best


def maze_paths(grid, end_row, end_col):
    """All simple paths through open cells (non-zero) from ``(0, 0)`` to the end.

    Moves are ``R`` (row + 1), ``L`` (row - 1), ``U`` (column - 1) and
    ``D`` (column + 1), tried in that order; the walk never leaves the
    rectangle spanned by the start and the end cell.
    """
    if not 0 <= end_row < len(grid) or not 0 <= end_col < len(grid[end_row]):
        raise ValueError("end cell lies outside the grid")
    paths = []
    visited = set()

    def walk(row, col, trail):
        if row < 0 or col < 0 or row > end_row or col > end_col:
            return
        if grid[row][col] == 0 or (row, col) in visited:
            return
        if (row, col) == (end_row, end_col):
            paths.append(trail)
        visited.add((row, col))
        for letter, d_row, d_col in _MOVES:
            walk(row + d_row, col + d_col, trail + letter)
        visited.discard((row, col))

    walk(0, 0, "")
    return paths


def countdown_rows(n):
    """Rows ``0..n-1``, ``0..n-2``, down to ``[0]``."""
    return [list(range(length)) for length in range(n, 0, -1)]