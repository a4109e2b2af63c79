import typer
from rich.console import Console

serve_app = typer.Typer(help="Start servers.")
console = Console()


@serve_app.command("api")
def api(
    host: str = "127.0.0.1",
    port: int = 8000,
) -> None:
    """Start the FastAPI REST API server."""
    import uvicorn

    from tokenizors.api.app import create_app
    from tokenizors.config import get_settings
    from tokenizors.logging_setup import setup_logging

    settings = get_settings()
    setup_logging(settings.log_level)
    app = create_app(settings)
    console.print(f"[green]Starting API server on {host}:{port}[/green]")
    uvicorn.run(app, host=host, port=port, log_config=None)
