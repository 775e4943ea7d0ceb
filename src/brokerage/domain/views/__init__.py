"""View models for service outputs."""

from brokerage.domain.views.portfolio import PositionView, Portfolio

__all__ = [
    "PositionView",
    "Portfolio",
]
