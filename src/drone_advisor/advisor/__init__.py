"""Flight condition evaluation and advice."""

from .advisor import FlightAdvisor
from .evaluator import ConditionDetail, Severity, Verdict, evaluate
from .outlook import hourly_outlook

__all__ = [
    "evaluate",
    "Verdict",
    "ConditionDetail",
    "Severity",
    "FlightAdvisor",
    "hourly_outlook",
]
