"""
ReservationLifecycle tests against the in-memory store.

The current date is pinned so the date rules are deterministic.
"""

from datetime import date, timedelta

import pytest

from bookingmx.adapters.memory_reservation_store import InMemoryReservationStore
from bookingmx.adapters.sqlite_reservation_store import SqliteReservationStore
from bookingmx.domain.errors import InvalidInput, InvalidState, NotFound
from bookingmx.domain.reservation import Reservation, ReservationRequest, ReservationStatus
from bookingmx.lifecycle import ReservationLifecycle, validate_dates

TODAY = date(2030, 1, 15)


def _days(n: int) -> date:
    return TODAY + timedelta(days=n)


def _request(
    check_in: date | None = None,
    check_out: date | None = None,
    guest: str = "Scarlett",
    hotel: str = "Hotel Azul",
) -> ReservationRequest:
    return ReservationRequest(
        guest_name=guest,
        hotel_name=hotel,
        check_in=check_in if check_in is not None else _days(1),
        check_out=check_out if check_out is not None else _days(3),
    )


@pytest.fixture
def store():
    return InMemoryReservationStore()


@pytest.fixture
def lifecycle(store):
    return ReservationLifecycle(store, today=lambda: TODAY)


# ---------------------------------------------------------------------------
# create
# ---------------------------------------------------------------------------


def test_create_valid_reservation(lifecycle, store):
    result = lifecycle.create(_request())

    assert result.id is not None
    assert result.status == ReservationStatus.ACTIVE
    assert result.guest_name == "Scarlett"
    assert result.hotel_name == "Hotel Azul"
    assert result.check_in == _days(1)
    assert result.check_out == _days(3)
    assert len(store.find_all()) == 1


def test_create_assigns_increasing_ids(lifecycle):
    ids = [lifecycle.create(_request()).id for _ in range(3)]
    assert ids == [1, 2, 3]


def test_create_check_out_before_check_in_rejected(lifecycle, store):
    with pytest.raises(InvalidInput, match="check-out must be after check-in"):
        lifecycle.create(_request(check_in=_days(5), check_out=_days(1)))
    assert store.find_all() == []


def test_create_same_day_check_out_rejected(lifecycle):
    with pytest.raises(InvalidInput, match="check-out must be after check-in"):
        lifecycle.create(_request(check_in=_days(2), check_out=_days(2)))


def test_create_past_check_in_rejected(lifecycle):
    with pytest.raises(InvalidInput, match="check-in must be in the future"):
        lifecycle.create(_request(check_in=_days(-1), check_out=_days(2)))


def test_create_check_in_today_allowed(lifecycle):
    result = lifecycle.create(_request(check_in=TODAY, check_out=_days(1)))
    assert result.check_in == TODAY


def test_create_missing_date_rejected(lifecycle):
    req = ReservationRequest("Scarlett", "Hotel Azul", None, _days(3))
    with pytest.raises(InvalidInput, match="dates cannot be absent"):
        lifecycle.create(req)


# ---------------------------------------------------------------------------
# validate_dates ordering
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "check_in, check_out, reason",
    [
        (None, _days(3), "dates cannot be absent"),
        (_days(1), None, "dates cannot be absent"),
        (None, None, "dates cannot be absent"),
        # both in the past and reversed: ordering rule reported first
        (_days(-1), _days(-5), "check-out must be after check-in"),
        (_days(-5), _days(-1), "check-in must be in the future"),
        (_days(-3), _days(2), "check-in must be in the future"),
    ],
)
def test_validate_dates_first_failure_wins(check_in, check_out, reason):
    with pytest.raises(InvalidInput) as exc_info:
        validate_dates(check_in, check_out, TODAY)
    assert exc_info.value.message == reason


def test_validate_dates_accepts_future_range():
    validate_dates(_days(1), _days(2), TODAY)  # must not raise


# ---------------------------------------------------------------------------
# update
# ---------------------------------------------------------------------------


def test_update_active_reservation(lifecycle, store):
    store.save(Reservation("Old Name", "Old Hotel", _days(2), _days(4)))

    result = lifecycle.update(1, _request(check_in=_days(3), check_out=_days(6)))

    assert result.id == 1
    assert result.guest_name == "Scarlett"
    assert result.hotel_name == "Hotel Azul"
    assert result.check_in == _days(3)
    assert result.check_out == _days(6)
    assert store.find_by_id(1).guest_name == "Scarlett"


def test_update_unknown_raises_not_found(lifecycle):
    with pytest.raises(NotFound):
        lifecycle.update(99, _request())


def test_update_canceled_raises_invalid_state(lifecycle):
    created = lifecycle.create(_request())
    lifecycle.cancel(created.id)

    with pytest.raises(InvalidState, match="cannot update a canceled reservation"):
        lifecycle.update(created.id, _request(check_in=_days(10), check_out=_days(12)))


def test_update_canceled_checked_before_dates(lifecycle):
    created = lifecycle.create(_request())
    lifecycle.cancel(created.id)

    with pytest.raises(InvalidState):
        lifecycle.update(created.id, ReservationRequest("x", "y", None, None))


def test_update_invalid_dates_leave_reservation_untouched(lifecycle, store):
    created = lifecycle.create(_request())

    with pytest.raises(InvalidInput):
        lifecycle.update(created.id, _request(check_in=_days(5), check_out=_days(4), guest="Bob"))

    stored = store.find_by_id(created.id)
    assert stored.guest_name == "Scarlett"
    assert stored.check_in == _days(1)


# ---------------------------------------------------------------------------
# cancel / list / get
# ---------------------------------------------------------------------------


def test_cancel_sets_status(lifecycle, store):
    created = lifecycle.create(_request())
    result = lifecycle.cancel(created.id)

    assert result.status == ReservationStatus.CANCELED
    assert store.find_by_id(created.id).status == ReservationStatus.CANCELED


def test_cancel_twice_is_allowed(lifecycle, store):
    created = lifecycle.create(_request())
    lifecycle.cancel(created.id)
    result = lifecycle.cancel(created.id)

    assert result.status == ReservationStatus.CANCELED
    assert len(store.find_all()) == 1


def test_cancel_unknown_raises_not_found(lifecycle):
    with pytest.raises(NotFound, match="reservation not found"):
        lifecycle.cancel(42)


def test_list_delegates_to_store(lifecycle):
    assert lifecycle.list() == []
    lifecycle.create(_request(guest="Ana"))
    lifecycle.create(_request(guest="Luis"))
    assert {r.guest_name for r in lifecycle.list()} == {"Ana", "Luis"}


def test_get_unknown_raises_not_found(lifecycle):
    with pytest.raises(NotFound):
        lifecycle.get(7)


def test_today_is_read_on_every_call(store):
    clock = {"today": TODAY}
    lifecycle = ReservationLifecycle(store, today=lambda: clock["today"])
    lifecycle.create(_request(check_in=_days(1), check_out=_days(3)))

    clock["today"] = _days(2)
    with pytest.raises(InvalidInput, match="check-in must be in the future"):
        lifecycle.create(_request(check_in=_days(1), check_out=_days(3)))


# ---------------------------------------------------------------------------
# End-to-end scenario
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("make_store", [InMemoryReservationStore, lambda: SqliteReservationStore(":memory:")])
def test_create_cancel_then_update_fails(make_store):
    lifecycle = ReservationLifecycle(make_store(), today=lambda: TODAY)

    created = lifecycle.create(_request(guest="Ana", hotel="H1"))
    assert created.id == 1
    assert created.status == ReservationStatus.ACTIVE

    canceled = lifecycle.cancel(1)
    assert canceled.status == ReservationStatus.CANCELED

    with pytest.raises(InvalidState):
        lifecycle.update(1, _request(check_in=_days(4), check_out=_days(8)))

    assert lifecycle.get(1).status == ReservationStatus.CANCELED
