"""Portfolio endpoint."""

from fastapi import APIRouter, Depends

from brokerage.api.deps import get_portfolio_service
from brokerage.api.schemas import PortfolioResponse
from brokerage.services import PortfolioService

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


@router.get("/{user_id}", response_model=PortfolioResponse)
def get_portfolio(
    user_id: int,
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioResponse:
    """Return available cash, total value and valued positions for a user."""
    return PortfolioResponse.from_domain(user_id, service.get_portfolio(user_id))
