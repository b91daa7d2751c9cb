"""
Onboarding Helper - CLI Entry Point.

Usage:
    onboarding-helper serve              Start the callback server
    onboarding-helper health             Check configuration
    onboarding-helper onboard USER_ID    Send the checklist to a user
    onboarding-helper signature ...      Render a signature locally
    onboarding-helper --help             Show help
"""

import logging
from pathlib import Path

import typer
from rich.console import Console

app = typer.Typer(
    name="onboarding-helper",
    help="EOTO onboarding bot - checklist DMs and email signatures.",
    add_completion=False,
)
console = Console()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command()
def serve(
    port: int = typer.Option(8000, "--port", "-p", help="Port to run on"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload for development"),
) -> None:
    """Start the callback server."""
    import os

    import uvicorn

    from onboarding_bot.config import get_settings

    _configure_logging(get_settings().log_level)

    # Hosting platforms set PORT
    actual_port = int(os.environ.get("PORT", port))

    console.print("\n[bold green]EOTO Onboarding Helper[/bold green]")
    console.print(f"Starting server on http://localhost:{actual_port}")
    console.print("[dim]Press Ctrl+C to stop[/dim]\n")

    uvicorn.run(
        "onboarding_bot.web.app:create_app",
        factory=True,
        host="0.0.0.0",
        port=actual_port,
        reload=reload,
    )


@app.command()
def health() -> None:
    """Check configuration and templates."""
    from onboarding.i18n import get_translations
    from onboarding.signature import TemplateError, load_templates
    from onboarding_bot.config import ConfigurationError, get_settings

    console.print("\n[bold]Onboarding Helper Health Check[/bold]\n")

    failed = False
    try:
        settings = get_settings()
    except Exception as e:
        console.print(f"\n[red]FAIL Configuration error: {e}[/red]")
        console.print("[dim]Make sure you have a .env file with required variables.[/dim]")
        raise typer.Exit(1)

    console.print("[green]OK[/green] Configuration loaded")
    console.print(f"   Environment: {settings.onboarding_env}")
    console.print(f"   Log level: {settings.log_level}")
    console.print(f"   Language: {get_translations(settings.bot_language).language.value}")

    if settings.mattermost_url.startswith(("http://", "https://")):
        console.print("[green]OK[/green] Mattermost URL configured")
    else:
        console.print("[red]FAIL[/red] MATTERMOST_URL missing or invalid")
        failed = True

    if settings.mattermost_bot_token:
        console.print("[green]OK[/green] Bot token configured")
    else:
        console.print("[red]FAIL[/red] MATTERMOST_BOT_TOKEN missing")
        failed = True

    try:
        console.print(f"[green]OK[/green] Callback URL: {settings.callback_base_url()}")
    except ConfigurationError as e:
        console.print(f"[yellow]WARN[/yellow] Checklist buttons disabled: {e}")

    if settings.kv_backend == "memory":
        console.print("[yellow]WARN[/yellow] In-memory KV store; state is lost on restart")
    elif settings.supabase_url and settings.supabase_service_role_key:
        console.print("[green]OK[/green] Supabase KV store configured")
    else:
        console.print("[red]FAIL[/red] SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY missing")
        failed = True

    try:
        templates = load_templates()
        console.print(f"[green]OK[/green] {len(templates)} signature templates valid")
    except TemplateError as e:
        console.print(f"[red]FAIL[/red] Signature templates: {e}")
        failed = True

    if failed:
        raise typer.Exit(1)
    console.print("\n[green]All checks passed![/green]")


@app.command()
def version() -> None:
    """Show version information."""
    from onboarding_bot import __version__

    console.print(f"EOTO Onboarding Helper version {__version__}")


@app.command()
def onboard(
    user_id: str = typer.Argument(..., help="Mattermost user id"),
) -> None:
    """Send the onboarding checklist to a user (no-op if already started)."""
    from onboarding.flow import start_onboarding_for_user
    from onboarding_bot.config import get_settings
    from onboarding_bot.web.app import build_context

    settings = get_settings()
    _configure_logging(settings.log_level)

    try:
        ctx = build_context(settings)
        user = ctx.platform.get_user(user_id)
        started = start_onboarding_for_user(ctx, user)
    except Exception as e:
        console.print(f"[red]FAIL[/red] {e}")
        raise typer.Exit(1)

    if started:
        console.print(f"[green]OK[/green] Checklist sent to {user.display_name}")
    else:
        console.print(f"[dim]Onboarding already started for {user.display_name}[/dim]")


@app.command()
def signature(
    full_name: str = typer.Option(..., "--name", "-n", help="Full name"),
    position: str = typer.Option(..., "--position", help="Position / role"),
    email: str = typer.Option(..., "--email", "-e", help="Email address"),
    project: str = typer.Option("each-one", "--project", help="Project key"),
    pronouns: str = typer.Option("", "--pronouns", help="e.g. 'sie/ihr / she/her'"),
    work_number: str = typer.Option("", "--phone", help="e.g. 'Tel.: 030 12345678'"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write HTML here instead of stdout"),
) -> None:
    """Render an email signature without going through the chat."""
    from onboarding.i18n import get_translations
    from onboarding.forms import SignatureForm, validate_signature_form
    from onboarding.signature import generate_signature, signature_filename
    from onboarding_bot.config import get_settings

    tr = get_translations(get_settings().bot_language)
    form = SignatureForm(
        full_name=full_name,
        position=position,
        email=email,
        project=project,
        pronouns=pronouns,
        work_number=work_number,
    )
    request, errors = validate_signature_form(form, tr)
    if errors:
        for field_name, message in errors.items():
            console.print(f"[red]{field_name}[/red]: {message}")
        raise typer.Exit(1)

    html = generate_signature(request)
    if output is None:
        print(html)
        return

    if output.is_dir():
        output = output / signature_filename(request.full_name, request.project)
    output.write_text(html, encoding="utf-8")
    console.print(f"[green]OK[/green] Signature written to {output}")


if __name__ == "__main__":
    app()
