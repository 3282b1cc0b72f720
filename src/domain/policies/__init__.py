"""Domain policies package."""

from .budget_limits import classify_budget_usage

__all__ = ["classify_budget_usage"]
