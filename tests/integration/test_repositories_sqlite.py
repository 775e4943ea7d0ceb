"""
Integration tests for SQLAlchemy repositories and the unit of work.

Tests cover:
- Instrument search, count and bulk lookup
- Latest market data selection
- FILLED order listing with time bounds
- Snapshot lookups and the one-per-day constraint
- Transaction commit/rollback and the per-user lock row
"""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from brokerage.domain.models import (
    InstrumentType,
    Order,
    OrderSide,
    OrderStatus,
    OrderType,
    PortfolioSnapshot,
)
from brokerage.core.timezone import start_of_day
from brokerage.repositories.sqlalchemy.orm_models import OrderORM, UserLockORM
from tests.conftest import market_datetime


# =============================================================================
# INSTRUMENT REPOSITORY TESTS
# =============================================================================


class TestInstrumentRepository:
    """Tests for the instrument directory."""

    @pytest.fixture
    def directory(self, instrument_factory):
        return [
            instrument_factory("YPFD", name="YPF S.A."),
            instrument_factory("GGAL", name="Grupo Financiero Galicia"),
            instrument_factory("BMA", name="Banco Macro"),
            instrument_factory("ARS", name="Peso", instrument_type=InstrumentType.MONEDA),
        ]

    def test_search_matches_ticker_or_name_case_insensitive(self, directory, instrument_repo):
        by_ticker = instrument_repo.search("ggal", limit=10, offset=0)
        by_name = instrument_repo.search("banco", limit=10, offset=0)

        assert [i.ticker for i in by_ticker] == ["GGAL"]
        assert [i.ticker for i in by_name] == ["BMA"]

    def test_empty_query_lists_all_ordered_by_ticker(self, directory, instrument_repo):
        results = instrument_repo.search(None, limit=10, offset=0)

        assert [i.ticker for i in results] == ["ARS", "BMA", "GGAL", "YPFD"]

    def test_pagination(self, directory, instrument_repo):
        page = instrument_repo.search("", limit=2, offset=1)

        assert [i.ticker for i in page] == ["BMA", "GGAL"]
        assert instrument_repo.count("") == 4

    def test_count_matches_search(self, directory, instrument_repo):
        assert instrument_repo.count("a") == len(instrument_repo.search("a", limit=100, offset=0))

    def test_get_many_omits_unknown(self, directory, instrument_repo):
        ids = [directory[0].instrument_id, 9999]

        found = instrument_repo.get_many(ids)

        assert list(found) == [directory[0].instrument_id]
        assert found[directory[0].instrument_id].ticker == "YPFD"

    def test_instrument_type_round_trips(self, directory, instrument_repo):
        cash = instrument_repo.get_by_id(directory[3].instrument_id)

        assert cash.instrument_type == InstrumentType.MONEDA


# =============================================================================
# MARKET DATA REPOSITORY TESTS
# =============================================================================


class TestMarketDataRepository:
    """Tests for the price feed."""

    def test_latest_by_date(self, stock, market_data_factory, market_data_repo):
        market_data_factory(stock, close=Decimal("90"), as_of=date(2024, 6, 1))
        market_data_factory(stock, close=Decimal("110"), as_of=date(2024, 6, 20))

        latest = market_data_repo.get_latest(stock.instrument_id)

        assert latest.close == Decimal("110")
        assert latest.as_of == date(2024, 6, 20)

    def test_no_rows(self, instrument_factory, market_data_repo):
        instrument = instrument_factory("PAMP")

        assert market_data_repo.get_latest(instrument.instrument_id) is None


# =============================================================================
# ORDER REPOSITORY TESTS
# =============================================================================


class TestOrderRepository:
    """Tests for the order ledger."""

    def test_create_assigns_id_and_resolves_instrument(self, stock, ledger_order_factory):
        order = ledger_order_factory(1, stock, OrderSide.BUY, 10, Decimal("100.50"))

        assert order.order_id is not None
        assert order.instrument.ticker == "GGAL"
        assert order.price == Decimal("100.50")
        assert order.placed_at.tzinfo is not None

    def test_list_filled_excludes_other_statuses_and_users(
        self, stock, ledger_order_factory, order_repo
    ):
        kept = ledger_order_factory(1, stock, OrderSide.BUY, 1)
        ledger_order_factory(1, stock, OrderSide.BUY, 2, status=OrderStatus.REJECTED)
        ledger_order_factory(1, stock, OrderSide.BUY, 3, status=OrderStatus.NEW, order_type=OrderType.LIMIT)
        ledger_order_factory(2, stock, OrderSide.BUY, 4)

        orders = order_repo.list_filled(1)

        assert [o.order_id for o in orders] == [kept.order_id]

    def test_list_filled_bounds_are_half_open(self, stock, ledger_order_factory, order_repo):
        """
        GIVEN orders at 23:59 on the 14th, 00:00 on the 15th and 00:00 on the 16th
        WHEN listing [start of 15th, start of 16th)
        THEN only the midnight order of the 15th is returned
        """
        ledger_order_factory(1, stock, OrderSide.BUY, 1, placed_at=market_datetime(2024, 6, 14, 23, 59))
        inside = ledger_order_factory(1, stock, OrderSide.BUY, 2, placed_at=market_datetime(2024, 6, 15, 0, 0))
        ledger_order_factory(1, stock, OrderSide.BUY, 3, placed_at=market_datetime(2024, 6, 16, 0, 0))

        orders = order_repo.list_filled(
            1, start=start_of_day(date(2024, 6, 15)), end=start_of_day(date(2024, 6, 16))
        )

        assert [o.order_id for o in orders] == [inside.order_id]

    def test_list_filled_ordered_by_time(self, stock, ledger_order_factory, order_repo):
        late = ledger_order_factory(1, stock, OrderSide.BUY, 1, placed_at=market_datetime(2024, 6, 15, 15))
        early = ledger_order_factory(1, stock, OrderSide.BUY, 2, placed_at=market_datetime(2024, 6, 15, 9))

        orders = order_repo.list_filled(1)

        assert [o.order_id for o in orders] == [early.order_id, late.order_id]

    def test_update_changes_status_only(self, stock, ledger_order_factory, order_repo, test_session):
        order = ledger_order_factory(
            1, stock, OrderSide.BUY, 10, Decimal("95"), status=OrderStatus.NEW, order_type=OrderType.LIMIT
        )
        order.status = OrderStatus.CANCELLED
        order.size = 999

        updated = order_repo.update(order)
        test_session.commit()

        assert updated.status == OrderStatus.CANCELLED
        assert updated.size == 10
        assert order_repo.get_by_id(order.order_id).status == OrderStatus.CANCELLED


# =============================================================================
# SNAPSHOT REPOSITORY TESTS
# =============================================================================


class TestSnapshotRepository:
    """Tests for end-of-day snapshots."""

    def _save(self, snapshot_repo, day: date, cash: str = "100") -> PortfolioSnapshot:
        return snapshot_repo.save(
            PortfolioSnapshot(user_id=1, snapshot_date=day, available_cash=Decimal(cash))
        )

    def test_find_latest_before_is_strict(self, snapshot_repo):
        self._save(snapshot_repo, date(2024, 6, 10), "10")
        self._save(snapshot_repo, date(2024, 6, 12), "12")
        self._save(snapshot_repo, date(2024, 6, 14), "14")

        latest = snapshot_repo.find_latest_before(1, date(2024, 6, 14))

        assert latest.snapshot_date == date(2024, 6, 12)
        assert latest.available_cash == Decimal("12")

    def test_find_exact_day(self, snapshot_repo):
        self._save(snapshot_repo, date(2024, 6, 14))

        assert snapshot_repo.find(1, date(2024, 6, 14)) is not None
        assert snapshot_repo.find(1, date(2024, 6, 13)) is None
        assert snapshot_repo.find(2, date(2024, 6, 14)) is None

    def test_one_snapshot_per_user_and_day(self, snapshot_repo):
        self._save(snapshot_repo, date(2024, 6, 14))

        with pytest.raises(IntegrityError):
            self._save(snapshot_repo, date(2024, 6, 14))


# =============================================================================
# UNIT OF WORK TESTS
# =============================================================================


class TestUnitOfWork:
    """Tests for transaction boundaries and the per-user lock."""

    def test_commits_on_success(self, stock, unit_of_work, order_repo, test_session):
        with unit_of_work.transaction():
            unit_of_work.acquire_user_lock(1)
            order_repo.create(_order(stock))

        assert test_session.query(OrderORM).count() == 1

    def test_rolls_back_and_reraises_on_error(self, stock, unit_of_work, order_repo, test_session):
        with pytest.raises(RuntimeError):
            with unit_of_work.transaction():
                unit_of_work.acquire_user_lock(1)
                order_repo.create(_order(stock))
                raise RuntimeError("boom")

        assert test_session.query(OrderORM).count() == 0
        assert test_session.query(UserLockORM).count() == 0

    def test_lock_row_is_created_once_per_user(self, unit_of_work, test_session):
        with unit_of_work.transaction():
            unit_of_work.acquire_user_lock(7)
        with unit_of_work.transaction():
            unit_of_work.acquire_user_lock(7)
        with unit_of_work.transaction():
            unit_of_work.acquire_user_lock(8)

        assert sorted(row.user_id for row in test_session.query(UserLockORM).all()) == [7, 8]

    def test_try_acquire_succeeds_without_contention(self, unit_of_work):
        with unit_of_work.transaction():
            assert unit_of_work.try_acquire_user_lock(1) is True


def _order(instrument):
    return Order(
        user_id=1,
        instrument_id=instrument.instrument_id,
        side=OrderSide.BUY,
        order_type=OrderType.MARKET,
        size=1,
        price=Decimal("1"),
        status=OrderStatus.FILLED,
        placed_at=market_datetime(2024, 6, 15, 10),
        instrument=instrument,
    )
