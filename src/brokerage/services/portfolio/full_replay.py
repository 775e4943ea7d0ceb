"""Full-replay portfolio valuation."""

from brokerage.domain.views import Portfolio
from brokerage.repositories.protocols import OrderRepository
from brokerage.services.market_data_service import MarketDataService
from brokerage.services.portfolio.valuation import ZERO, apply_orders, build_portfolio


class FullReplayPortfolioEngine:
    """Computes the portfolio by replaying every FILLED order from zero."""

    def __init__(
        self,
        order_repo: OrderRepository,
        market_data_service: MarketDataService,
    ):
        self._order_repo = order_repo
        self._market_data_service = market_data_service

    def get_portfolio(self, user_id: int) -> Portfolio:
        orders = self._order_repo.list_filled(user_id)
        cash, positions = apply_orders(orders, ZERO, {})
        return build_portfolio(cash, positions, self._market_data_service)
