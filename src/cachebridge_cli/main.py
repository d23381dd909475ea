"""CLI entrypoint using typer."""

from __future__ import annotations

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console

from cachebridge_core.config.settings import Settings
from cachebridge_core.interfaces.cache import CacheClient
from cachebridge_infra.cache.factory import create_cache_client
from cachebridge_infra.observability import bind_cache_context, configure_logging

app = typer.Typer(
    name="cachebridge",
    help="Inspect and manage a Memcached server through the generic cache contract",
)
console = Console()
logger = structlog.get_logger()

_HOST_OPTION = typer.Option(None, "--host", help="Memcached host (overrides CB_MEMCACHED_HOST)")
_VERBOSE_OPTION = typer.Option(False, "-v", "--verbose", help="Enable debug logging")


def _open_cache(host: str | None, verbose: bool) -> CacheClient:
    """Load settings, apply CLI overrides, configure logging and build the client."""
    try:
        settings = Settings(memcached_host=host) if host else Settings()
    except ValidationError as exc:
        console.print(f"[red]Error:[/red] invalid settings: {exc.errors()[0]['msg']}")
        raise typer.Exit(code=2) from exc
    if verbose:
        settings.log_level = "DEBUG"

    configure_logging(settings)
    bind_cache_context(settings.memcached_host)
    return create_cache_client(settings)


@app.command()
def get(
    key: str = typer.Argument(..., help="Cache key"),
    default: str | None = typer.Option(None, "--default", help="Printed on a miss"),
    host: str | None = _HOST_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Print the value stored under KEY."""
    cache = _open_cache(host, verbose)
    value = cache.get(key, default)
    if value is None:
        console.print(f"[yellow]Miss:[/yellow] {key}")
        raise typer.Exit(code=1)
    console.print(value, markup=False, highlight=False)


@app.command("set")
def set_(
    key: str = typer.Argument(..., help="Cache key"),
    value: str = typer.Argument(..., help="Value to store"),
    ttl: int | None = typer.Option(None, "--ttl", min=0, help="Expiry in seconds"),
    host: str | None = _HOST_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Store VALUE under KEY."""
    cache = _open_cache(host, verbose)
    if not cache.set(key, value, ttl):
        console.print(f"[red]Not stored:[/red] {key}")
        raise typer.Exit(code=1)
    console.print(f"[green]Stored:[/green] {key}")


@app.command()
def delete(
    key: str = typer.Argument(..., help="Cache key"),
    host: str | None = _HOST_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Delete KEY."""
    cache = _open_cache(host, verbose)
    if not cache.delete(key):
        console.print(f"[red]Not deleted:[/red] {key}")
        raise typer.Exit(code=1)
    console.print(f"[green]Deleted:[/green] {key}")


@app.command()
def has(
    key: str = typer.Argument(..., help="Cache key"),
    host: str | None = _HOST_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Exit 0 if KEY is present, 1 otherwise."""
    cache = _open_cache(host, verbose)
    if cache.has(key):
        console.print(f"[green]Present:[/green] {key}")
        return
    console.print(f"[yellow]Absent:[/yellow] {key}")
    raise typer.Exit(code=1)


@app.command()
def clear(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
    host: str | None = _HOST_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Flush every entry on the server."""
    if not yes:
        typer.confirm("Flush the entire Memcached server?", abort=True)
    cache = _open_cache(host, verbose)
    if not cache.clear():
        console.print("[red]Not flushed:[/red] no server reachable")
        raise typer.Exit(code=1)
    logger.info("cache_flushed")
    console.print("[green]Cache flushed[/green]")


@app.command()
def version() -> None:
    """Show version."""
    console.print("cachebridge v0.1.0")


if __name__ == "__main__":
    app()
