"""Portfolio read service."""

from brokerage.domain.views import Portfolio
from brokerage.repositories.protocols import UnitOfWork
from brokerage.services.portfolio import PortfolioEngine


class PortfolioService:
    """
    Serves a user's current portfolio.

    Reads take the user's lock so a snapshot write never races an order
    submission for the same user.
    """

    def __init__(self, portfolio_engine: PortfolioEngine, unit_of_work: UnitOfWork):
        self._portfolio_engine = portfolio_engine
        self._uow = unit_of_work

    def get_portfolio(self, user_id: int) -> Portfolio:
        with self._uow.transaction():
            self._uow.acquire_user_lock(user_id)
            return self._portfolio_engine.get_portfolio(user_id)
