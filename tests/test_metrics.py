import pytest

from channel_export.metrics import calculate_average_views


@pytest.mark.parametrize("views,videos,expected", [
    (90000, 30, 3000),
    (100, 3, 33),
    (0, 5, 0),
    (12345, 0, 0),
])
def test_calculate_average_views(views, videos, expected):
    assert calculate_average_views(views, videos) == expected
