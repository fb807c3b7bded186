"""
wacloudapi CLI.

Developer helpers for webhook payloads and Graph API error bodies.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from wacloudapi.core.errors import WebhookParseError, classify_error
from wacloudapi.webhooks import (
    SIGNATURE_PREFIX,
    Unknown,
    classify_webhook,
    compute_signature,
    parse_webhook,
    verify_signature,
)

app = typer.Typer(help="wacloudapi - WhatsApp Cloud API developer tools")
console = Console()


def _read_body(file_path: Path) -> bytes:
    if not file_path.is_file():
        typer.echo(f"❌ File not found: {file_path}", err=True)
        raise typer.Exit(1)
    return file_path.read_bytes()


@app.command()
def events(
    file_path: Path = typer.Argument(..., help="File holding a raw webhook body"),
    secret: str | None = typer.Option(
        None, "--secret", "-s", help="App secret; enables signature checking"
    ),
    signature: str | None = typer.Option(
        None, "--signature", help="X-Hub-Signature-256 header value"
    ),
):
    """
    Print the domain events of a webhook payload.

    Examples:
        wacloudapi events payload.json
        wacloudapi events payload.json --secret $APP_SECRET --signature sha256=ab12...
    """
    body = _read_body(file_path)

    if secret is not None and not verify_signature(body, signature, secret):
        typer.echo("❌ Signature verification failed", err=True)
        raise typer.Exit(1)

    try:
        envelope = parse_webhook(body)
    except WebhookParseError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1) from e

    table = Table(title=f"{envelope.object} ({len(envelope.entry)} entries)")
    table.add_column("#", justify="right")
    table.add_column("kind")
    table.add_column("details")

    for index, event in enumerate(classify_webhook(envelope), start=1):
        details = event.model_dump(exclude={"kind"}, exclude_none=True, by_alias=True)
        style = "yellow" if isinstance(event, Unknown) else None
        table.add_row(str(index), event.kind, str(details), style=style)

    console.print(table)


@app.command()
def sign(
    file_path: Path = typer.Argument(..., help="File holding a raw webhook body"),
    secret: str = typer.Option(..., "--secret", "-s", help="App secret"),
):
    """Print the X-Hub-Signature-256 header Meta would send for a body."""
    body = _read_body(file_path)
    typer.echo(f"{SIGNATURE_PREFIX}{compute_signature(body, secret)}")


@app.command("classify-error")
def classify_error_command(
    file_path: Path = typer.Argument(..., help="File holding an error response body"),
    status: int = typer.Option(400, "--status", help="HTTP status of the response"),
):
    """Print the classification of a Graph API error response."""
    body = _read_body(file_path)
    classification = classify_error(status, body)
    console.print_json(classification.model_dump_json())


if __name__ == "__main__":
    app()
