"""Order lifecycle orchestration: create and cancel."""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable

from brokerage.core.exceptions import NotFoundError, ValidationError
from brokerage.core.timezone import now_local, to_local
from brokerage.domain.models import Order, OrderStatus, OrderType
from brokerage.repositories.protocols import OrderRepository, UnitOfWork
from brokerage.services.instrument_service import InstrumentService
from brokerage.services.market_data_service import MarketDataService
from brokerage.services.order_builders import OrderCreate, create_order_builder
from brokerage.services.order_processors import create_order_processor
from brokerage.services.portfolio import PortfolioEngine

logger = logging.getLogger(__name__)


class OrderService:
    """
    Service for submitting and cancelling orders.

    Every mutation runs inside one transaction holding the owner's lock, so
    the portfolio seen during validation is the one the new order lands on.
    """

    def __init__(
        self,
        instrument_service: InstrumentService,
        market_data_service: MarketDataService,
        order_repo: OrderRepository,
        portfolio_engine: PortfolioEngine,
        unit_of_work: UnitOfWork,
        clock: Callable[[], datetime] = now_local,
    ):
        self._instrument_service = instrument_service
        self._market_data_service = market_data_service
        self._order_repo = order_repo
        self._portfolio_engine = portfolio_engine
        self._uow = unit_of_work
        self._clock = clock

    def create_order(self, data: OrderCreate) -> Order:
        """
        Submit a new order.

        Infeasible orders are persisted as REJECTED rather than raised.

        Raises:
            ValidationError: malformed request for the order type
            NotFoundError: unknown instrument or no market price
        """
        self._validate_order_create(data)

        with self._uow.transaction():
            self._uow.acquire_user_lock(data.user_id)

            instrument = self._instrument_service.get_instrument(data.instrument_id)

            market_price = None
            if data.order_type == OrderType.MARKET and not data.side.is_cash_side:
                market_price = self._market_data_service.get_market_price(
                    data.instrument_id
                )

            portfolio = self._portfolio_engine.get_portfolio(data.user_id)

            builder = create_order_builder(data.order_type)
            builder.validate_input(data)
            order = builder.build_order(data, instrument, market_price)

            processor = create_order_processor(order)
            is_valid = processor.validate_order(
                portfolio.available_cash, portfolio.positions_map
            )
            order = replace(
                order,
                status=processor.determine_status(is_valid),
                placed_at=to_local(self._clock()),
            )

            created = self._order_repo.create(order)

        if created.status == OrderStatus.REJECTED:
            logger.info(
                "Rejected %s %s order %s for user %s: size=%s price=%s",
                created.order_type.value,
                created.side.value,
                created.order_id,
                created.user_id,
                created.size,
                created.price,
            )
        else:
            logger.info(
                "Created %s %s order %s for user %s with status %s",
                created.order_type.value,
                created.side.value,
                created.order_id,
                created.user_id,
                created.status.value,
            )
        return created

    def cancel_order(self, order_id: int) -> Order:
        """Cancel a resting (NEW) order."""
        with self._uow.transaction():
            order = self._order_repo.get_by_id(order_id)
            if not order:
                raise NotFoundError(f"Order with id {order_id} not found")

            self._check_cancellable(order)

            self._uow.acquire_user_lock(order.user_id)

            # The status may have moved while waiting for the lock
            order = self._order_repo.get_by_id(order_id)
            self._check_cancellable(order)

            updated = self._order_repo.update(replace(order, status=OrderStatus.CANCELLED))

        logger.info("Cancelled order %s for user %s", order_id, updated.user_id)
        return updated

    @staticmethod
    def _check_cancellable(order: Order) -> None:
        if order.status != OrderStatus.NEW:
            raise ValidationError(
                f"Cannot cancel order with status {order.status.value}. "
                "Only orders with status NEW can be cancelled"
            )

    def _validate_order_create(self, data: OrderCreate) -> None:
        """Request-level checks that do not need the store."""
        if data.size is not None and data.size <= 0:
            raise ValidationError("Size must be a positive integer")
        if data.amount is not None and data.amount <= 0:
            raise ValidationError("Amount must be positive")
        if data.price is not None and data.price <= 0:
            raise ValidationError("Price must be positive")
        if data.amount is not None and data.order_type != OrderType.MARKET:
            raise ValidationError("Amount is only supported for MARKET orders")
        if data.side.is_cash_side and data.order_type != OrderType.MARKET:
            raise ValidationError(f"{data.side.value} orders must be MARKET orders")
