"""Display projections of a verdict.

Pure functions; the rich rendering in advisor.py only formats what
these return.
"""

from __future__ import annotations

from enum import Enum

from ..core.limits import DJI_MINI_2, LimitsProfile
from ..weather.models import GeomagneticReading
from .evaluator import ConditionDetail, Severity, Verdict

KP_SCALE_MAX = 9
KP_CAUTION = 3


class BannerState(Enum):
    """Overall status shown at the top of the report."""

    OPTIMAL = ("CONDICIONES ÓPTIMAS", "Ideal para volar tu {drone}", "green")
    CAUTION = ("VOLAR CON PRECAUCIÓN", "Algunas condiciones no son óptimas", "yellow")
    NO_FLY = ("NO VOLAR", "Condiciones peligrosas para el dron", "red")

    def __init__(self, title: str, description: str, color: str):
        self.title = title
        self.description = description
        self.color = color

    def describe(self, limits: LimitsProfile = DJI_MINI_2) -> str:
        return self.description.format(drone=limits.name)


def banner_state(verdict: Verdict) -> BannerState:
    if not verdict.safe:
        return BannerState.NO_FLY
    if verdict.has_warnings:
        return BannerState.CAUTION
    return BannerState.OPTIMAL


POSITIVE_AFFIRMATIONS = (
    "Condiciones óptimas para vuelo",
    "Viento dentro de límites seguros",
    "Buena visibilidad",
    "Temperatura adecuada",
)
CAUTIOUS_GO = "Vuelo posible con precauciones"


def recommendation_lines(verdict: Verdict) -> list[tuple[Severity, str]]:
    """Flat recommendation list: dangers, then warnings, then affirmations.

    The four affirmations replace the list only when nothing was flagged.
    """
    if not verdict.danger_messages and not verdict.warning_messages:
        return [(Severity.SAFE, line) for line in POSITIVE_AFFIRMATIONS]

    lines = [(Severity.DANGER, m) for m in verdict.danger_messages]
    lines += [(Severity.WARNING, m) for m in verdict.warning_messages]
    if verdict.safe:
        lines.append((Severity.SAFE, CAUTIOUS_GO))
    return lines


def group_details(verdict: Verdict) -> list[tuple[Severity, list[ConditionDetail]]]:
    """Details grouped by severity, danger first. Empty groups are omitted.

    Informational notes are only shown when the flight is safe.
    """
    order = [Severity.DANGER, Severity.WARNING]
    if verdict.safe:
        order.append(Severity.SAFE)

    groups = []
    for severity in order:
        items = verdict.details_by_severity(severity)
        if items:
            groups.append((severity, items))
    return groups


def details_available(verdict: Verdict) -> bool:
    """Whether there is anything worth a detailed explanation."""
    return not verdict.safe or verdict.has_warnings


def kp_risk_label(reading: GeomagneticReading, limits: LimitsProfile = DJI_MINI_2) -> tuple[str, str]:
    """Risk label and color for the Kp card."""
    if reading.value > limits.kp_max:
        return "Alto riesgo", "red"
    elif reading.value > KP_CAUTION:
        return "Precaución", "yellow"
    return "Normal", "green"


def kp_scale_position(reading: GeomagneticReading) -> float:
    """Marker position of the reading on the 0-9 scale, as a 0-1 fraction."""
    return max(0.0, min(1.0, reading.value / KP_SCALE_MAX))
