"""The fetch, rank, render and publish sequence of one reporting run."""

from rich.console import Console

from .github_client import GitHubClient
from .models import ReportConfig
from .output import render
from .ranking import rank

console = Console()


def run_report(config: ReportConfig, client: GitHubClient, dry_run: bool = False) -> str:
    """
    Publish the top issues ranking for one repository.

    Each step runs only after the previous one finished; any failure
    propagates and nothing is published.

    Args:
        config: Resolved run configuration
        client: GitHub client used for reading and publishing
        dry_run: Render the report without updating the issue

    Returns:
        The rendered report body
    """
    console.print("[bold]Step 1: Fetching open issues...[/bold]")
    issues = client.fetch_open_issues(config.owner, config.repo)

    console.print("\n[bold]Step 2: Ranking issues...[/bold]")
    report = rank(issues, min_upvotes=config.min_upvotes, max_per_label=config.max_per_label)
    console.print(
        f"[green]{len(report.all_issues)} issues with at least {config.min_upvotes} :+1: "
        f"({len(report.enhancement_issues)} enhancement, {len(report.bug_issues)} bug)[/green]"
    )

    console.print("\n[bold]Step 3: Rendering report...[/bold]")
    body = render(report)

    if dry_run:
        console.print("[yellow]Dry run: skipping update of the report issue[/yellow]")
        return body

    console.print(f"\n[bold]Step 4: Publishing to issue #{config.issue_number}...[/bold]")
    client.publish(config.owner, config.repo, config.issue_number, body)
    return body
