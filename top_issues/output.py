"""Markdown rendering of the ranking report."""

from .models import GitHubIssue, RankedReport

REPORT_HEADING = "## Top Issues"


def format_issue_line(issue: GitHubIssue) -> str:
    """Format one ranked issue as a Markdown list entry."""
    # Markdown renumbers "1." entries itself
    return f"1. [{issue.url}]({issue.url}) - {issue.upvotes} :+1:"


def render(report: RankedReport) -> str:
    """
    Render the report body published to the tracking issue.

    Only ``all_issues`` is listed. The enhancement and bug groups are part
    of the report but are not written to the body.

    Args:
        report: Ranked issues

    Returns:
        Markdown text ending with a newline
    """
    lines = [REPORT_HEADING]
    lines.extend(format_issue_line(issue) for issue in report.all_issues)
    return "\n".join(lines) + "\n"
