"""Greedy algorithms: scheduling, coin change, knapsack and related problems."""

from itertools import accumulate
from operator import itemgetter

DEFAULT_COINS = (1, 2, 3, 5, 10, 20, 50, 100, 500, 1000)


def average_waiting_time(jobs):
    """Average (integer) waiting time when jobs run shortest first."""
    durations = sorted(jobs)
    if not durations:
        raise ValueError("no jobs given")
    waits = accumulate(durations[:-1], initial=0)
    return sum(waits) // len(durations)


def greedy_coin_change(target, coins=DEFAULT_COINS):
    """Return the coins picked greedily, largest first, towards ``target``."""
    if target < 0:
        raise ValueError("target must not be negative")
    used = []
    for coin in sorted(coins, reverse=True):
        if coin <= 0:
            raise ValueError("coin values must be positive")
        count, target = divmod(target, coin)
        used.extend([coin] * count)
    return used


def schedule_jobs(jobs, slots):
    """Place ``(deadline, profit)`` jobs into time slots, most profitable first.

    Each job takes the latest free slot not after its deadline. Returns the
    slot assignment (profits, ``None`` where a slot stays free) and the
    total profit.
    """
    assignment = [None] * slots
    total = 0
    for deadline, profit in sorted(jobs, key=itemgetter(1), reverse=True):
        for slot in range(min(deadline, slots - 1), -1, -1):
            if assignment[slot] is None:
                assignment[slot] = profit
                total += profit
                break
    return assignment, total


def fractional_knapsack(items, capacity):
    """Best value from ``(value, weight)`` items when items may be split."""
    total = 0.0
    remaining = float(capacity)
    for value, weight in sorted(items, key=lambda item: item[0] / item[1], reverse=True):
        if weight < remaining:
            total += value
            remaining -= weight
        else:
            total += remaining / weight * value
            break
    return total


def select_meetings(meetings):
    """Pick the most ``(start, end)`` meetings that do not touch or overlap."""
    chosen = []
    last_end = None
    for start, end in sorted(meetings, key=itemgetter(1)):
        if last_end is None or start > last_end:
            chosen.append((start, end))
            last_end = end
    return chosen


def platforms_needed(arrivals, departures):
    """Minimum platforms so no train waits, by merging sorted times."""
    if len(arrivals) != len(departures):
        raise ValueError("arrivals and departures differ in length")
    arrive = sorted(arrivals)
    depart = sorted(departures)
    n = len(arrive)
    i = j = 0
    occupied = best = 0
    while i < n and j < n:
        if arrive[i] < depart[j]:
            occupied += 1
            i += 1
        else:
            occupied -= 1
            j += 1
        best = max(best, occupied)
    return best


def platforms_by_chaining(schedule):
    """Platforms needed when each train reuses the latest freed earlier platform.

    ``schedule`` holds ``(arrival, departure)`` pairs in arrival order.
    """
    earlier = []
    platforms = 0
    for arrival, departure in schedule:
        for entry in reversed(earlier):
            if arrival > entry[0] and entry[1]:
                entry[1] = False
                break
        else:
            platforms += 1
        earlier.append([departure, True])
    return platforms


def count_candies(ratings):
    """Candies needed so that higher-rated neighbours get more, by slopes."""
    n = len(ratings)
    if n == 0:
        return 0
    i = 1
    total = 1
    while i < n:
        peak = 1
        down = 1
        if ratings[i - 1] == ratings[i]:
            total += 1
            i += 1
        while i < n and ratings[i] > ratings[i - 1]:
            peak += 1
            total += peak
            i += 1
        while i < n and ratings[i] < ratings[i - 1]:
            if i == 1:
                down = 2
            total += down
            down += 1
            i += 1
    return total