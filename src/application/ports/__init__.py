"""Application ports package."""

from .budgets_repository import BudgetsRepositoryPort
from .database import DatabaseEnginePort
from .legs_repository import LegsRepositoryPort

__all__ = [
    "BudgetsRepositoryPort",
    "DatabaseEnginePort",
    "LegsRepositoryPort",
]
