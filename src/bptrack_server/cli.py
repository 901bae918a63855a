"""CLI entry point for bptrack-server."""

import asyncio

import typer
import uvicorn

from bptrack_server import __version__
from bptrack_server.core.config import settings
from bptrack_server.core.database import get_session
from bptrack_server.schemas.profiles import ProfileCreate
from bptrack_server.services.classification import classify as classify_pair
from bptrack_server.services.profiles import ProfileService

app = typer.Typer(
    name="bptrack-server",
    help="Blood pressure tracking server",
    no_args_is_help=True,
)

# Household used by `seed-demo`
DEMO_PROFILES = [
    ProfileCreate(name="John Doe", gender="male", age=46),
    ProfileCreate(name="Dad", gender="male", age=76, medical_conditions=["Diabetic"]),
    ProfileCreate(name="Mom", gender="female", age=73),
]


@app.command()
def serve(
    host: str = typer.Option(None, help="Host to bind to (overrides config)"),
    port: int = typer.Option(None, help="Port to bind to (overrides config)"),
    reload: bool = typer.Option(False, help="Enable auto-reload for development"),
) -> None:
    """Start the API server.

    Example:
        bptrack-server serve
        bptrack-server serve --host 0.0.0.0 --port 8080 --reload
    """
    uvicorn.run(
        "bptrack_server.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command()
def classify(
    systolic: int = typer.Argument(..., help="Systolic pressure (mmHg)"),
    diastolic: int = typer.Argument(..., help="Diastolic pressure (mmHg)"),
) -> None:
    """Classify a reading and show its derived metrics.

    Example:
        bptrack-server classify 128 82
    """
    metrics = classify_pair(systolic, diastolic)
    typer.echo(f"{systolic}/{diastolic}: {metrics.category}")
    typer.echo(f"  {metrics.classification.description}")
    typer.echo(f"  Pulse pressure: {metrics.pulse_pressure} mmHg")
    typer.echo(f"  Mean arterial pressure: {metrics.mean_arterial_pressure} mmHg")


async def _seed_demo() -> list[str]:
    async with get_session() as session:
        service = ProfileService(session)
        profiles = [await service.create_profile(data) for data in DEMO_PROFILES]
        return [f"{p.name} ({p.id})" for p in profiles]


@app.command("seed-demo")
def seed_demo() -> None:
    """Create a sample household of profiles in the configured database."""
    for line in asyncio.run(_seed_demo()):
        typer.echo(f"Created profile {line}")


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"bptrack-server v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
