"""Command line interface for the Top Issues reporter."""

import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from .config import build_config, load_settings
from .exceptions import ConfigurationError, PublishError, TransportError
from .github_client import GitHubClient
from .pipeline import run_report

# Load environment variables
load_dotenv()

app = typer.Typer(help="Top Issues - publish a ranking of the most upvoted open issues")
console = Console()

# Names GitHub Actions gives to the org_name, repo_name and issue_number inputs
INPUT_ENV_VARS = {
    "org_name": "INPUT_ORG_NAME",
    "repo_name": "INPUT_REPO_NAME",
    "issue_number": "INPUT_ISSUE_NUMBER",
}


@app.command()
def run(
    org_name: Optional[str] = typer.Option(None, "--org", "-o", envvar=INPUT_ENV_VARS["org_name"], help="Owner of the repository"),
    repo_name: Optional[str] = typer.Option(None, "--repo", "-r", envvar=INPUT_ENV_VARS["repo_name"], help="Repository to rank issues for"),
    issue_number: Optional[str] = typer.Option(None, "--issue-number", "-i", envvar=INPUT_ENV_VARS["issue_number"], help="Issue whose body receives the ranking"),
    config_file: Optional[str] = typer.Option(None, "--config", "-c", help="Path to an optional YAML config file"),
    dry_run: bool = typer.Option(False, "--dry-run", "-d", help="Print the report instead of updating the issue"),
):
    """Rank open issues by :+1: reactions and publish the result."""

    banner = Text("Top Issues", style="bold cyan")
    console.print(Panel(banner, border_style="cyan"))
    console.print()

    try:
        config = build_config(
            load_settings(config_file),
            owner=org_name,
            repo=repo_name,
            issue_number=issue_number,
            token=os.getenv("GITHUB_TOKEN"),
        )
        if not dry_run and not config.token:
            raise ConfigurationError("GITHUB_TOKEN is required to update the report issue")

        client = GitHubClient(token=config.token)
        body = run_report(config, client, dry_run=dry_run)
    except ConfigurationError as exc:
        console.print(f"[red]Configuration error: {escape(str(exc))}[/red]")
        sys.exit(1)
    except TransportError as exc:
        console.print(f"[red]Could not fetch issues: {escape(str(exc))}[/red]")
        sys.exit(1)
    except PublishError as exc:
        console.print(f"[red]Could not publish report: {escape(str(exc))}[/red]")
        sys.exit(1)

    if dry_run:
        console.print()
        console.print(body, markup=False, emoji=False, highlight=False, soft_wrap=True)
        return

    console.print()
    console.print(Panel(
        f"[green]✓ Complete![/green]\n\n"
        f"Ranking published to [cyan]{config.full_name}#{config.issue_number}[/cyan]",
        title="Summary",
        border_style="green"
    ))


@app.command()
def check(
    config_file: Optional[str] = typer.Option(None, "--config", "-c", help="Path to an optional YAML config file"),
):
    """Check credentials and inputs without calling the GitHub API."""
    console.print("[bold]Checking configuration...[/bold]\n")

    if os.getenv("GITHUB_TOKEN"):
        console.print("[green]✓ GITHUB_TOKEN is set[/green]")
    else:
        console.print("[red]✗ GITHUB_TOKEN not set (required to update the report issue)[/red]")

    for input_name, env_var in INPUT_ENV_VARS.items():
        value = os.getenv(env_var)
        if value:
            console.print(f"[green]✓ {env_var} is set: {value}[/green]")
        else:
            console.print(f"[yellow]⚠ {env_var} not set (pass the {input_name} value as an option or in the config file)[/yellow]")

    if config_file is None:
        console.print("[yellow]⚠ No config file given (optional)[/yellow]")
    elif Path(config_file).exists():
        console.print(f"[green]✓ {config_file} exists[/green]")
    else:
        console.print(f"[red]✗ {config_file} not found[/red]")
