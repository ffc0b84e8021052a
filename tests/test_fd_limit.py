import pytest

from fastchess.fd_limit import (
    max_concurrency,
    max_system_file_descriptor_count,
    min_file_descriptor_required,
)


def test_system_limit_positive():
    assert max_system_file_descriptor_count() > 0


@pytest.mark.parametrize(
    "concurrency, fds",
    [(1, 26), (2, 38), (4, 62), (8, 110), (16, 206), (32, 398)],
)
def test_min_file_descriptor_required(concurrency, fds):
    assert min_file_descriptor_required(concurrency) == fds


@pytest.mark.parametrize(
    "fds, concurrency",
    [(26, 1), (38, 2), (62, 4), (110, 8), (206, 16), (398, 32)],
)
def test_max_concurrency(fds, concurrency):
    assert max_concurrency(fds) == concurrency


@pytest.mark.parametrize("concurrency", range(1, 50))
def test_round_trip(concurrency):
    assert max_concurrency(min_file_descriptor_required(concurrency)) == concurrency


def test_truncates_toward_zero_below_base():
    assert max_concurrency(20) == 1