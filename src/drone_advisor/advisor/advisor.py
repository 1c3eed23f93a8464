"""Flight advisor with terminal rendering of the verdict."""

from __future__ import annotations

import logging

from rich import box
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table
from rich.text import Text

from ..config import AdvisorConfig
from ..core.limits import DJI_MINI_2, LimitsProfile
from ..core.location import Location
from ..weather.geomagnetic import GeomagneticService
from ..weather.hours import select_hour
from ..weather.models import FALLBACK_READING, GeomagneticReading, HourlyForecast, HourlySample
from ..weather.service import WeatherService, fallback_forecast
from .evaluator import Severity, Verdict, evaluate
from .outlook import flyable_hours, hourly_outlook
from .presentation import (
    BannerState,
    banner_state,
    details_available,
    group_details,
    kp_risk_label,
    kp_scale_position,
    recommendation_lines,
)

logger = logging.getLogger(__name__)

SEVERITY_STYLES = {
    Severity.DANGER: ("red", "x"),
    Severity.WARNING: ("yellow", "!"),
    Severity.SAFE: ("green", "+"),
}

DETAIL_HEADINGS = {
    Severity.DANGER: (
        "CONDICIONES PELIGROSAS",
        "No vueles tu {drone} por las siguientes razones:",
    ),
    Severity.WARNING: ("PRECAUCIONES", "Vuela con cuidado considerando:"),
    Severity.SAFE: ("CONDICIONES FAVORABLES", None),
}


class FlightAdvisor:
    """Weather-aware flight advice for one location.

    Loads the hourly forecast and the planetary Kp index, then evaluates
    any forecast hour against the drone's limits.
    """

    def __init__(
        self,
        location: Location | None = None,
        limits: LimitsProfile = DJI_MINI_2,
        config: AdvisorConfig | None = None,
        console: Console | None = None
    ):
        """Initialize the advisor.

        Args:
            location: Target location. Defaults to Buenos Aires.
            limits: Drone operating limits.
            config: Endpoint configuration. Defaults to environment settings.
            console: Console to render to.
        """
        self.location = location or Location.buenos_aires()
        self.limits = limits
        self.config = config or AdvisorConfig.from_env()
        self.console = console or Console()
        self.weather_service = WeatherService(location=self.location, config=self.config)
        self.geomagnetic_service = GeomagneticService(config=self.config)
        self.forecast: HourlyForecast | None = None
        self.kp_reading: GeomagneticReading = FALLBACK_READING
        self.using_fallback = False

    def refresh(self) -> None:
        """Reload forecast and Kp index.

        A failed forecast is replaced by the synthetic fallback forecast.
        """
        forecast = self.weather_service.get_forecast()
        if forecast is None:
            logger.warning(f"Using example forecast for {self.location.name}")
            forecast = fallback_forecast()
            self.using_fallback = True
        else:
            self.using_fallback = False
        self.forecast = forecast
        self.kp_reading = self.geomagnetic_service.get_reading()

    def ensure_loaded(self) -> None:
        if self.forecast is None:
            self.refresh()

    def evaluate_hour(self, hour: int = 0) -> tuple[HourlySample, Verdict]:
        """Evaluate one forecast hour.

        Args:
            hour: Forecast hour index; clamped to the forecast length

        Returns:
            Tuple of (sample, verdict)
        """
        self.ensure_loaded()
        sample = select_hour(self.forecast, hour)
        return sample, evaluate(sample, self.kp_reading, self.limits)

    def hour_label(self, hour: int) -> str:
        if self.forecast is None or len(self.forecast) == 0:
            return f"{hour:02d}:00"
        return self.forecast.hour_label(min(max(hour, 0), len(self.forecast) - 1))

    def create_status_panel(self, verdict: Verdict, hour: int = 0) -> Panel:
        """Create the status banner."""
        state = banner_state(verdict)
        content = (
            f"[bold {state.color}]{state.title}[/bold {state.color}]\n"
            f"{state.describe(self.limits)}\n\n"
            f"[dim]{escape(self.location.name)} - {self.hour_label(hour)}[/dim]"
        )
        return Panel(content, title="Estado de vuelo", border_style=state.color)

    def create_conditions_table(self, sample: HourlySample) -> Table:
        """Create the table of measured conditions."""
        table = Table(
            title=f"Condiciones en {escape(self.location.name)}",
            box=box.ROUNDED,
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("Medida", width=22)
        table.add_column("Valor", justify="right", width=12)
        table.add_column("Límite", justify="right", width=14)

        limits = self.limits
        table.add_row("Temperatura", f"{sample.temp}°C", f"{limits.temp_min:g} a {limits.temp_max:g}°C")
        table.add_row("Viento", f"{sample.wind} km/h", f"{limits.wind_max:g} km/h")
        table.add_row("Ráfagas", f"{sample.gusts} km/h", f"{limits.gust_max:g} km/h")
        table.add_row("Nubosidad", f"{sample.clouds}%", f"{limits.cloud_max:g}%")
        table.add_row("Prob. de lluvia", f"{sample.rain}%", f"{limits.rain_max:g}%")
        table.add_row("Visibilidad", f"{sample.visibility:.1f} km", f"min {limits.visibility_min:g} km")
        return table

    def create_kp_panel(self, reading: GeomagneticReading) -> Panel:
        """Create the geomagnetic activity card."""
        label, color = kp_risk_label(reading, self.limits)
        width = 27
        marker = round(kp_scale_position(reading) * (width - 1))
        scale = "".join("|" if i == marker else "-" for i in range(width))

        content = (
            f"[bold]{reading.value:.1f}[/bold]  0 {scale} 9\n"
            f"Estado: [bold]{reading.status.value.upper()}[/bold] "
            f"[{color}]({label})[/{color}]\n"
            "[dim]Mide interferencias en GPS y brújula. Valores altos (>4) "
            "pueden afectar el vuelo del dron.[/dim]"
        )
        return Panel(content, title="Actividad Geomagnética (Kp)", border_style=color)

    def create_recommendations_panel(self, verdict: Verdict) -> Panel:
        """Create the recommendations list."""
        lines = []
        for severity, message in recommendation_lines(verdict):
            color, mark = SEVERITY_STYLES[severity]
            lines.append(f"[{color}]{mark}[/{color}] {message}")
        return Panel("\n".join(lines), title="Recomendaciones", border_style="cyan")

    def create_details_panel(self, verdict: Verdict) -> Panel:
        """Create the detailed explanation grouped by severity."""
        blocks = []
        for severity, items in group_details(verdict):
            color, mark = SEVERITY_STYLES[severity]
            heading, intro = DETAIL_HEADINGS[severity]
            lines = [f"[bold {color}]{heading}[/bold {color}]"]
            if intro:
                lines.append(intro.format(drone=self.limits.name))
            for detail in items:
                lines.append(
                    f"  [{color}]{mark}[/{color}] [bold]{detail.title}[/bold] "
                    f"[dim]({detail.icon})[/dim]"
                )
                lines.append(f"    {detail.message}")
            blocks.append(Text.from_markup("\n".join(lines)))

        blocks.append(Text.from_markup(
            "[bold cyan]Sobre el Índice Kp[/bold cyan]\n"
            "El índice Kp mide la actividad geomagnética (0-9). Valores altos pueden afectar:\n"
            "  [bold]GPS:[/bold] Precisión reducida\n"
            "  [bold]Brújula:[/bold] Calibración necesaria\n"
            "  [bold]Señal:[/bold] Posibles interferencias\n"
            "[dim]Datos del NOAA - Actualizado cada 3 horas[/dim]"
        ))
        return Panel(Group(*blocks), title="Detalles", border_style="cyan")

    def create_outlook_table(self, hours: int | None = None) -> Table:
        """Create an hour-by-hour status table."""
        self.ensure_loaded()
        df = hourly_outlook(self.forecast, self.kp_reading, self.limits, hours=hours)

        table = Table(
            title=f"Pronóstico por hora - {escape(self.location.name)}",
            box=box.ROUNDED,
            show_header=True,
            header_style="bold cyan"
        )
        for column in df.columns:
            table.add_column(column, justify="left" if column in ("Hour", "Status") else "right")

        for row in df.itertuples(index=False):
            values = [str(v) for v in row]
            status_index = df.columns.get_loc("Status")
            color = BannerState[values[status_index]].color
            values[status_index] = f"[{color}]{values[status_index]}[/{color}]"
            table.add_row(*values)

        flyable = flyable_hours(df)
        table.caption = (
            f"{len(flyable)} of {len(df)} hours without dangers"
            if flyable else "No flyable hours in this forecast"
        )
        return table

    def _print_fallback_notice(self) -> None:
        if self.using_fallback:
            self.console.print(
                "[yellow]No se pudieron cargar datos en tiempo real. "
                "Mostrando datos de ejemplo.[/yellow]"
            )

    def _load_with_progress(self) -> None:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True
        ) as progress:
            task = progress.add_task("Cargando datos meteorológicos...", total=None)
            self.refresh()
            progress.update(task, completed=100)

    def run(self, hour: int = 0, show_details: bool = False) -> Verdict:
        """Load data and display the report for one hour.

        Args:
            hour: Forecast hour index
            show_details: Print the detail panel

        Returns:
            The displayed verdict
        """
        self._load_with_progress()
        sample, verdict = self.evaluate_hour(hour)

        self._print_fallback_notice()
        self.console.print(self.create_status_panel(verdict, hour))
        self.console.print(self.create_conditions_table(sample))
        self.console.print(self.create_kp_panel(self.kp_reading))
        self.console.print(self.create_recommendations_panel(verdict))
        if show_details:
            self.console.print(self.create_details_panel(verdict))
        elif details_available(verdict):
            self.console.print("[dim]Usa --details para ver el detalle completo.[/dim]")
        return verdict

    def run_outlook(self, hours: int | None = None) -> None:
        """Load data and display the hour-by-hour table."""
        self._load_with_progress()
        self._print_fallback_notice()
        self.console.print(self.create_outlook_table(hours))

    def to_dict(self, hour: int = 0) -> dict:
        """Report for one hour as a JSON-serializable dict."""
        sample, verdict = self.evaluate_hour(hour)
        state = banner_state(verdict)
        return {
            "location": {
                "name": self.location.name,
                "latitude": self.location.latitude,
                "longitude": self.location.longitude,
            },
            "drone": self.limits.name,
            "hour": self.hour_label(hour),
            "example_data": self.using_fallback,
            "conditions": {
                "temp_c": sample.temp,
                "wind_kmh": sample.wind,
                "gusts_kmh": sample.gusts,
                "clouds_percent": sample.clouds,
                "rain_percent": sample.rain,
                "visibility_km": sample.visibility,
            },
            "kp": {
                "value": round(self.kp_reading.value, 2),
                "status": self.kp_reading.status.value,
            },
            "status": state.name,
            "verdict": verdict.to_dict(),
        }
