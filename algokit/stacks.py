"""Monotonic stack problems and a stack with constant-time minimum."""


def previous_smaller(nums):
    """For each element, the nearest earlier strictly smaller element, or -1."""
    result = []
    stack = []
    for value in nums:
        while stack and stack[-1] >= value:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(value)
    return result


def next_greater_circular(nums):
    """For each element, the next strictly greater element, wrapping around, or -1."""
    n = len(nums)
    result = [-1] * n
    stack = []
    for position in range(2 * n - 1, -1, -1):
        value = nums[position % n]
        while stack and stack[-1] <= value:
            stack.pop()
        if position < n and stack:
            result[position] = stack[-1]
        stack.append(value)
    return result


class MinStack:
    """Stack of integers reporting its minimum in constant time and space.

    When a new minimum ``x`` is pushed, ``2 * x - old_min`` is stored in its
    place so the previous minimum can be recovered when it is popped.
    """

    def __init__(self):
        self._items = []
        self._min = None

    def push(self, x):
        if not self._items:
            self._items.append(x)
            self._min = x
        elif x < self._min:
            self._items.append(2 * x - self._min)
            self._min = x
        else:
            self._items.append(x)

    def pop(self):
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        stored = self._items.pop()
        if stored < self._min:
            value = self._min
            self._min = 2 * self._min - stored
        else:
            value = stored
        if not self._items:
            self._min = None
        return value

    def top(self):
        if not self._items:
            raise IndexError("top of empty stack")
        stored = self._items[-1]
        return self._min if stored < self._min else stored

    def minimum(self):
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._min

    def __len__(self):
        return len(self._items)