"""Flight condition evaluation.

Maps one hour of weather plus the current Kp index onto a verdict for the
drone's limits. Each dimension reports at most its single most severe
band; all comparisons are strict, so a reading equal to a limit passes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..core.limits import DJI_MINI_2, LimitsProfile
from ..weather.models import GeomagneticReading, HourlySample

# Fixed bands that do not depend on the drone profile
TEMP_WARNING_LOW = 5
TEMP_WARNING_HIGH = 35
WIND_WARNING_RATIO = 0.7
VISIBILITY_WARNING_KM = 5
KP_DANGER = 6
KP_WARNING = 4
KP_NOTE = 2


class Severity(Enum):
    """Severity of a condition detail."""

    DANGER = "danger"
    WARNING = "warning"
    SAFE = "safe"


@dataclass(frozen=True)
class ConditionDetail:
    """Explanation of one evaluated dimension.

    Attributes:
        severity: Danger, warning, or informational safe note
        title: Short label
        message: Sentence quoting the measurement and, where relevant, the limit
        icon: Presentation hint naming a symbol for the dimension
    """
    severity: Severity
    title: str
    message: str
    icon: str


@dataclass(frozen=True)
class Verdict:
    """Aggregated flight decision for one hour.

    Attributes:
        safe: False if any dimension is dangerous
        danger_messages: Short danger summaries in dimension order
        warning_messages: Short warning summaries in dimension order
        details: All details in dimension order
    """
    safe: bool
    danger_messages: tuple[str, ...]
    warning_messages: tuple[str, ...]
    details: tuple[ConditionDetail, ...]

    @property
    def has_warnings(self) -> bool:
        return bool(self.warning_messages)

    def details_by_severity(self, severity: Severity) -> list[ConditionDetail]:
        return [d for d in self.details if d.severity is severity]

    def to_dict(self) -> dict:
        return {
            "safe": self.safe,
            "dangers": list(self.danger_messages),
            "warnings": list(self.warning_messages),
            "details": [
                {
                    "type": d.severity.value,
                    "title": d.title,
                    "message": d.message,
                    "icon": d.icon,
                }
                for d in self.details
            ],
        }


def _num(value: float) -> str:
    """Render a measurement the way it is displayed: no trailing .0 on whole numbers."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class _VerdictBuilder:
    def __init__(self):
        self.dangers: list[str] = []
        self.warnings: list[str] = []
        self.details: list[ConditionDetail] = []

    def danger(self, summary: str, title: str, message: str, icon: str) -> None:
        self.dangers.append(summary)
        self.details.append(ConditionDetail(Severity.DANGER, title, message, icon))

    def warning(self, summary: str, title: str, message: str, icon: str) -> None:
        self.warnings.append(summary)
        self.details.append(ConditionDetail(Severity.WARNING, title, message, icon))

    def note(self, title: str, message: str, icon: str) -> None:
        self.details.append(ConditionDetail(Severity.SAFE, title, message, icon))

    def build(self) -> Verdict:
        return Verdict(
            safe=not self.dangers,
            danger_messages=tuple(self.dangers),
            warning_messages=tuple(self.warnings),
            details=tuple(self.details),
        )


def _check_temperature(out: _VerdictBuilder, temp: float, limits: LimitsProfile) -> None:
    t = _num(temp)
    if temp < limits.temp_min:
        out.danger(
            f"Temperatura muy baja ({t}°C)",
            "Temperatura baja",
            f"La temperatura de {t}°C está por debajo del mínimo recomendado "
            f"({_num(limits.temp_min)}°C) para el {limits.name}. "
            "Puede afectar la batería y el rendimiento.",
            "temperature-low",
        )
    elif temp > limits.temp_max:
        out.danger(
            f"Temperatura muy alta ({t}°C)",
            "Temperatura alta",
            f"La temperatura de {t}°C excede el máximo recomendado "
            f"({_num(limits.temp_max)}°C). El dron puede sobrecalentarse "
            "y la batería se degradará más rápido.",
            "temperature-high",
        )
    elif temp < TEMP_WARNING_LOW or temp > TEMP_WARNING_HIGH:
        out.warning(
            f"Temperatura en límites ({t}°C)",
            "Temperatura extrema",
            f"La temperatura de {t}°C está cerca de los límites de operación. "
            "Monitorea la temperatura de la batería.",
            "thermometer",
        )


def _check_wind(out: _VerdictBuilder, wind: float, limits: LimitsProfile) -> None:
    w = _num(wind)
    if wind > limits.wind_max:
        out.danger(
            f"Viento fuerte ({w} km/h)",
            "Viento excesivo",
            f"Viento de {w} km/h excede el límite del {limits.name} "
            f"({_num(limits.wind_max)} km/h). El dron puede perder estabilidad "
            "y tener dificultades para regresar.",
            "wind",
        )
    elif wind > limits.wind_max * WIND_WARNING_RATIO:
        out.warning(
            f"Viento moderado ({w} km/h)",
            "Viento moderado",
            f"Viento de {w} km/h. Vuela con precaución, mantén el dron a la vista "
            "y considera reducir la distancia máxima.",
            "wind",
        )


def _check_gusts(out: _VerdictBuilder, gusts: float, limits: LimitsProfile) -> None:
    g = _num(gusts)
    if gusts > limits.gust_max:
        out.danger(
            f"Ráfagas fuertes ({g} km/h)",
            "Ráfagas peligrosas",
            f"Ráfagas de hasta {g} km/h. Son impredecibles y pueden voltear el dron "
            "o causar pérdida de control.",
            "gauge",
        )
    elif gusts > limits.gust_max * WIND_WARNING_RATIO:
        out.warning(
            f"Ráfagas moderadas ({g} km/h)",
            "Ráfagas presentes",
            f"Ráfagas de {g} km/h detectadas. Mantén una altura segura y evita "
            "vuelos sobre obstáculos.",
            "gauge",
        )


def _check_rain(out: _VerdictBuilder, rain: float, limits: LimitsProfile) -> None:
    r = _num(rain)
    if rain > limits.rain_max:
        out.danger(
            f"Probabilidad de lluvia alta ({r}%)",
            "Riesgo de lluvia",
            f"Probabilidad de lluvia del {r}%. El {limits.name} NO es resistente "
            "al agua. La lluvia puede dañar los motores y componentes electrónicos "
            "permanentemente.",
            "droplet",
        )
    elif rain > 0:
        out.warning(
            f"Posibilidad de lluvia ({r}%)",
            "Posible lluvia",
            f"{r}% de probabilidad de lluvia. Prepárate para aterrizar rápidamente "
            "si comienza a llover.",
            "cloud-rain",
        )


def _check_clouds(out: _VerdictBuilder, clouds: float, limits: LimitsProfile) -> None:
    # Clouds never ground the drone on their own
    if clouds > limits.cloud_max:
        c = _num(clouds)
        out.warning(
            f"Mucha nubosidad ({c}%)",
            "Nubosidad alta",
            f"Cobertura de nubes del {c}%. Puede afectar la señal GPS y la "
            "estabilidad del vuelo. Mantén el dron a la vista.",
            "cloud",
        )


def _check_visibility(out: _VerdictBuilder, visibility: float, limits: LimitsProfile) -> None:
    v = f"{visibility:.1f}"
    if visibility < limits.visibility_min:
        out.danger(
            f"Visibilidad reducida ({v} km)",
            "Visibilidad limitada",
            f"Visibilidad de {v} km. Dificulta mantener el dron a la vista y aumenta "
            "el riesgo de colisiones. Vuelo no recomendado.",
            "eye",
        )
    elif visibility < VISIBILITY_WARNING_KM:
        out.warning(
            f"Visibilidad moderada ({v} km)",
            "Visibilidad reducida",
            f"Visibilidad de {v} km. Mantén el dron cerca y usa luces si vuelas "
            "al atardecer.",
            "eye",
        )


def _check_geomagnetic(out: _VerdictBuilder, geo: GeomagneticReading) -> None:
    kp = f"{geo.value:.1f}"
    if geo.value > KP_DANGER:
        out.danger(
            f"Alta actividad geomagnética (Kp={kp})",
            "Tormenta geomagnética",
            f"Índice Kp de {kp} ({geo.status.value}). Puede causar interferencias "
            "en GPS, pérdida de señal y lecturas erróneas de la brújula. NO VUELES.",
            "satellite",
        )
    elif geo.value > KP_WARNING:
        out.warning(
            f"Actividad geomagnética moderada (Kp={kp})",
            "Alteraciones magnéticas",
            f"Índice Kp de {kp}. Puede haber interferencias en GPS. Calibrar la "
            "brújula antes de volar y verificar la señal GPS constantemente.",
            "compass",
        )
    elif geo.value > KP_NOTE:
        out.note(
            "Actividad geomagnética baja",
            f"Índice Kp de {kp}. Condiciones normales para GPS y brújula.",
            "satellite",
        )


def evaluate(
    sample: HourlySample,
    geo: GeomagneticReading,
    limits: LimitsProfile = DJI_MINI_2,
) -> Verdict:
    """Evaluate whether conditions are suitable for flying.

    Dimensions are checked in a fixed order (temperature, wind, gusts,
    rain, clouds, visibility, geomagnetic) and their details appear in
    that order regardless of severity.

    Args:
        sample: Conditions for the selected hour
        geo: Current geomagnetic reading
        limits: Drone operating limits

    Returns:
        Verdict; never raises for numeric input
    """
    out = _VerdictBuilder()
    _check_temperature(out, sample.temp, limits)
    _check_wind(out, sample.wind, limits)
    _check_gusts(out, sample.gusts, limits)
    _check_rain(out, sample.rain, limits)
    _check_clouds(out, sample.clouds, limits)
    _check_visibility(out, sample.visibility, limits)
    _check_geomagnetic(out, geo)
    return out.build()
