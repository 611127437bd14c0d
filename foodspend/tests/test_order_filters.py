import pytest

from foodspend.app.domain.errors import InvalidDateRange
from foodspend.app.services.order_filters import filter_orders
from foodspend.app.services.order_validation import validate_order


def _order(oid: str, category: str, when: str, amount: float = 10.0, quantity: int = 1):
    return validate_order(
        {"category": category, "amount": amount, "quantity": quantity, "date": when},
        id_factory=lambda: oid,
    )


@pytest.fixture()
def orders():
    return [
        _order("o1", "Pizza", "2024-03-01"),
        _order("o2", "Sushi", "2024-03-05"),
        _order("o3", "Pizza", "2024-03-10"),
        _order("o4", "Pizza", "2024-03-10T12:00:00"),
        _order("o5", "Salads", "2024-04-02"),
    ]


def _ids(rows):
    return [o.id for o in rows]


def test_no_filters_returns_everything_in_insertion_order(orders):
    assert _ids(filter_orders(orders)) == ["o1", "o2", "o3", "o4", "o5"]


def test_category_filter(orders):
    assert _ids(filter_orders(orders, category="Pizza")) == ["o1", "o3", "o4"]


def test_unrecognized_category_is_ignored(orders):
    assert _ids(filter_orders(orders, category="Tacos")) == _ids(orders)


def test_date_range_is_inclusive(orders):
    rows = filter_orders(orders, start_date="2024-03-01", end_date="2024-03-10")
    # end date is midnight, so the afternoon order on the 10th falls outside
    assert _ids(rows) == ["o1", "o2", "o3"]


def test_date_range_combines_with_category(orders):
    rows = filter_orders(orders, category="Pizza", start_date="2024-03-02", end_date="2024-03-31")
    assert _ids(rows) == ["o3", "o4"]


@pytest.mark.parametrize(
    "kwargs",
    [{"start_date": "2024-03-05"}, {"end_date": "2024-03-05"}, {"start_date": "garbage"}],
)
def test_single_sided_range_is_ignored(orders, kwargs):
    assert _ids(filter_orders(orders, **kwargs)) == _ids(orders)


def test_start_after_end_matches_nothing(orders):
    assert filter_orders(orders, start_date="2024-03-10", end_date="2024-03-01") == []


@pytest.mark.parametrize(
    "start, end",
    [("garbage", "2024-03-10"), ("2024-03-01", "2024-02-30"), ("nope", "nada")],
)
def test_unparseable_range_raises(orders, start, end):
    with pytest.raises(InvalidDateRange) as excinfo:
        filter_orders(orders, start_date=start, end_date=end)
    assert str(excinfo.value) == "Invalid date range"


def test_filtering_does_not_mutate_input(orders):
    before = list(orders)
    filter_orders(orders, category="Sushi", start_date="2024-01-01", end_date="2024-12-31")
    assert orders == before


@pytest.mark.parametrize(
    "start, end",
    [("0001-01-01T00:00:00+05:00", "2024-03-10"), ("2024-03-01", "9999-12-31T23:00:00-05:00")],
)
def test_range_outside_utc_bounds_raises(orders, start, end):
    with pytest.raises(InvalidDateRange):
        filter_orders(orders, start_date=start, end_date=end)
