"""Command-line interface for drone-advisor."""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from ..core.location import Location, resolve_location


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.option(
    '--lat',
    type=float,
    help='Latitude of target location'
)
@click.option(
    '--lon',
    type=float,
    help='Longitude of target location'
)
@click.option(
    '--location', '-l',
    type=str,
    default=None,
    help='Place name (e.g., "Córdoba", "Mendoza"). Resolved via Open-Meteo geocoding.'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug logging'
)
@click.version_option(package_name='drone-advisor')
@click.pass_context
def cli(
    ctx: click.Context,
    lat: float | None,
    lon: float | None,
    location: str | None,
    debug: bool
) -> None:
    """Drone flight conditions advisor.

    Checks the hourly forecast and geomagnetic activity for a location
    and tells you whether it is safe to fly a DJI Mini 2.

    Examples:

        drone-advisor check

        drone-advisor --location Córdoba check --hour 15

        drone-advisor --lat -31.42 --lon -64.18 outlook

        drone-advisor search "San Carlos"
    """
    ctx.ensure_object(dict)
    _configure_logging(debug)

    if (lat is None) != (lon is None):
        raise click.UsageError("--lat and --lon must be given together.")

    ctx.obj['location'] = None
    ctx.obj['location_name'] = location
    if lat is not None and lon is not None:
        try:
            ctx.obj['location'] = Location.from_coordinates(lat, lon, name=location)
        except ValueError as e:
            raise click.BadParameter(str(e))


def _target_location(ctx: click.Context) -> Location:
    """Location for the commands that need one.

    Priority: --lat/--lon, then --location (geocoded), then Buenos Aires.
    """
    if ctx.obj['location'] is not None:
        return ctx.obj['location']

    name = ctx.obj['location_name']
    if not name:
        return Location.buenos_aires()

    resolved = resolve_location(name)
    if resolved is None:
        raise click.ClickException(
            f"Could not find location '{name}'. "
            "Try a different name or use --lat/--lon coordinates."
        )
    return resolved


@cli.command()
@click.option(
    '--hour', '-H',
    type=click.IntRange(min=0),
    default=0,
    help='Forecast hour to evaluate (0 = first hour, default: 0)'
)
@click.option(
    '--details', '-d',
    is_flag=True,
    help='Show the detailed explanation'
)
@click.option(
    '--json', '-j', 'output_json',
    is_flag=True,
    help='Output as JSON for automation'
)
@click.pass_context
def check(ctx: click.Context, hour: int, details: bool, output_json: bool) -> None:
    """Check whether conditions are safe to fly.

    Shows the flight status, current conditions, geomagnetic
    activity and recommendations for the selected hour.
    """
    import json

    from ..advisor.advisor import FlightAdvisor

    advisor = FlightAdvisor(location=_target_location(ctx))

    if output_json:
        advisor.refresh()
        click.echo(json.dumps(advisor.to_dict(hour), indent=2, ensure_ascii=False))
    else:
        advisor.run(hour=hour, show_details=details)


@cli.command()
@click.option(
    '--hours',
    type=click.IntRange(min=1),
    default=None,
    help='Number of hours to show (default: whole forecast)'
)
@click.pass_context
def outlook(ctx: click.Context, hours: int | None) -> None:
    """Show the flight status for every forecast hour."""
    from ..advisor.advisor import FlightAdvisor

    advisor = FlightAdvisor(location=_target_location(ctx))
    advisor.run_outlook(hours=hours)


@cli.command()
@click.argument('query')
@click.option(
    '--count',
    type=click.IntRange(1, 20),
    default=5,
    help='Maximum number of suggestions (default: 5)'
)
def search(query: str, count: int) -> None:
    """Search for a place by name.

    Lists matching places with their region and coordinates. Use
    the name with --location, or the coordinates with --lat/--lon.
    """
    from ..core.location import MIN_SUGGESTION_LENGTH, search_places

    if len(query.strip()) < MIN_SUGGESTION_LENGTH:
        raise click.BadParameter(
            f"Query must have at least {MIN_SUGGESTION_LENGTH} characters.",
            param_hint="QUERY"
        )

    places = search_places(query, count=count)
    if not places:
        click.echo(f"No places found for '{query}'.")
        return

    for i, place in enumerate(places, 1):
        click.echo(f"{i}. {place.name}")
        if place.region:
            click.echo(f"   {place.region}")
        click.echo(f"   --lat {place.latitude:.4f} --lon {place.longitude:.4f}")


@cli.command()
@click.option(
    '--json', '-j', 'output_json',
    is_flag=True,
    help='Output as JSON for automation'
)
def kp(output_json: bool) -> None:
    """Show current geomagnetic activity (planetary Kp index)."""
    import json

    from ..advisor.advisor import FlightAdvisor
    from ..advisor.presentation import kp_risk_label
    from ..weather.geomagnetic import GeomagneticService

    reading = GeomagneticService().get_reading()

    if output_json:
        label, _ = kp_risk_label(reading)
        click.echo(json.dumps({
            "value": round(reading.value, 2),
            "status": reading.status.value,
            "risk": label,
        }, indent=2, ensure_ascii=False))
    else:
        console = Console()
        console.print(FlightAdvisor(console=console).create_kp_panel(reading))


def main() -> None:
    """Main entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
