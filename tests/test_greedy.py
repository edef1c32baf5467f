import itertools

import pytest

from algokit.greedy import (
    DEFAULT_COINS,
    average_waiting_time,
    count_candies,
    fractional_knapsack,
    greedy_coin_change,
    platforms_by_chaining,
    platforms_needed,
    schedule_jobs,
    select_meetings,
)

SOURCE_JOBS = [(2, 80), (6, 70), (6, 65), (5, 60), (4, 25), (2, 22), (4, 20), (2, 10)]
SOURCE_ITEMS = [(100, 20), (60, 10), (100, 50), (200, 50)]
SOURCE_MEETINGS = [(0, 5), (3, 4), (1, 2), (5, 9), (5, 7), (8, 9)]
ARRIVALS = [900, 945, 955, 1100, 1500, 1800]
DEPARTURES = [920, 1200, 1130, 1150, 1900, 2000]


def test_average_waiting_time_ignores_order():
    jobs = [4, 3, 7, 1, 2]
    results = {average_waiting_time(list(p)) for p in itertools.permutations(jobs)}
    assert len(results) == 1


def test_average_waiting_time_single_job_waits_nothing():
    assert average_waiting_time([42]) == 0


def test_average_waiting_time_empty_raises():
    with pytest.raises(ValueError):
        average_waiting_time([])


@pytest.mark.parametrize("target", [0, 1, 49, 999, 1888])
def test_coin_change_sums_to_target(target):
    used = greedy_coin_change(target)
    assert sum(used) == target
    assert used == sorted(used, reverse=True)
    assert set(used) <= set(DEFAULT_COINS)


def test_coin_change_negative_target_raises():
    with pytest.raises(ValueError):
        greedy_coin_change(-1)


def test_schedule_jobs_invariants():
    assignment, total = schedule_jobs(SOURCE_JOBS, 8)
    assert len(assignment) == 8
    placed = [profit for profit in assignment if profit is not None]
    assert total == sum(placed)
    assert set(placed) <= {profit for _, profit in SOURCE_JOBS}
    assert 80 in placed


def test_schedule_jobs_respects_deadlines():
    assignment, _ = schedule_jobs(SOURCE_JOBS, 8)
    deadline_of = {profit: deadline for deadline, profit in SOURCE_JOBS}
    for slot, profit in enumerate(assignment):
        if profit is not None:
            assert slot <= deadline_of[profit]


def test_fractional_knapsack_source_example():
    assert fractional_knapsack(SOURCE_ITEMS, 90) == pytest.approx(380.0)


def test_fractional_knapsack_everything_fits():
    total_weight = sum(weight for _, weight in SOURCE_ITEMS)
    total_value = sum(value for value, _ in SOURCE_ITEMS)
    assert fractional_knapsack(SOURCE_ITEMS, total_weight + 1) == pytest.approx(total_value)


def test_fractional_knapsack_zero_capacity():
    assert fractional_knapsack(SOURCE_ITEMS, 0) == 0.0


def test_select_meetings_source_example():
    assert select_meetings(SOURCE_MEETINGS) == [(1, 2), (3, 4), (5, 7), (8, 9)]


def test_select_meetings_never_overlap():
    chosen = select_meetings(SOURCE_MEETINGS + [(2, 3), (9, 10), (4, 6)])
    for (_, end), (start, _) in zip(chosen, chosen[1:]):
        assert start > end


def test_platform_methods_agree_on_source_schedule():
    schedule = list(zip(ARRIVALS, DEPARTURES))
    assert platforms_needed(ARRIVALS, DEPARTURES) == platforms_by_chaining(schedule)


def test_disjoint_trains_share_one_platform():
    arrivals = [100, 300, 500]
    departures = [200, 400, 600]
    assert platforms_needed(arrivals, departures) == 1
    assert platforms_by_chaining(list(zip(arrivals, departures))) == 1


def test_platforms_needed_length_mismatch():
    with pytest.raises(ValueError):
        platforms_needed([1, 2], [3])


def test_count_candies_source_example():
    assert count_candies([0, 1, 2, 5, 3, 2, 7]) == 15


@pytest.mark.parametrize("n", [1, 2, 5])
def test_count_candies_equal_ratings(n):
    assert count_candies([4] * n) == n


def test_count_candies_empty():
    assert count_candies([]) == 0