"""Developer CLI for checking CEK requests locally."""

import asyncio
import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .config import settings
from .errors import ClovaError, VerificationError
from .services.context import Context
from .services.verifier import verify

app = typer.Typer(help="Clova CEK skill tools")
console = Console()


@app.command("verify")
def verify_request(
    body_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Raw request body"),
    signature: str = typer.Option(..., "--signature", "-s", help="SignatureCEK header value"),
    application_id: str = typer.Option(
        settings.application_id, "--application-id", "-a", help="Expected extension ID"
    ),
):
    """Verify a captured request body against its signature."""
    try:
        payload = verify(signature, application_id, body_file.read_bytes())
    except VerificationError as e:
        console.print(f"[red]Verification failed: {e}[/red]")
        raise typer.Exit(1)

    ctx = Context(payload)

    table = Table(title="Verified request")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("Application", application_id)
    table.add_row("Version", ctx.request_object.version)
    table.add_row("Request type", ctx.request_type)
    table.add_row("Request ID", ctx.request_object.request.request_id or "-")
    table.add_row("Session ID", ctx.get_session_id() or "-")
    table.add_row("Intent", ctx.get_intent_name() or "-")

    console.print(table)


@app.command()
def simulate(
    payload_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Request payload JSON"),
):
    """Run a request payload through the echo skill and print the response."""
    from .main import skill

    payload = json.loads(payload_file.read_text(encoding="utf-8"))

    try:
        response = asyncio.run(skill.dispatch(payload))
    except ClovaError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print_json(data=response)


if __name__ == "__main__":
    app()
