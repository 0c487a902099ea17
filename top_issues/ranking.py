"""Filtering, ordering and label grouping of fetched issues."""

from typing import Iterable, List

from .models import GitHubIssue, RankedReport

DEFAULT_MIN_UPVOTES = 2
DEFAULT_MAX_PER_LABEL = 20

ENHANCEMENT_LABEL = "enhancement"
BUG_LABEL = "bug"


def has_label(label: str, issue: GitHubIssue) -> bool:
    """Check whether an issue carries ``label`` (exact, case-sensitive)."""
    return any(issue_label == label for issue_label in issue.labels)


def top_issues_by_label(
    label: str,
    issues: Iterable[GitHubIssue],
    limit: int = DEFAULT_MAX_PER_LABEL
) -> List[GitHubIssue]:
    """
    Collect issues carrying a label, keeping the incoming order.

    Args:
        label: Label name to match
        issues: Issues already sorted by upvotes
        limit: Maximum number of issues to keep

    Returns:
        The first ``limit`` matching issues
    """
    labelled = [issue for issue in issues if has_label(label, issue)]
    return labelled[:limit]


def rank(
    issues: Iterable[GitHubIssue],
    min_upvotes: int = DEFAULT_MIN_UPVOTES,
    max_per_label: int = DEFAULT_MAX_PER_LABEL
) -> RankedReport:
    """
    Build the ranking report for a set of issues.

    Issues below ``min_upvotes`` are dropped, the rest are sorted by
    upvotes descending. Python's sort is stable, so issues with equal
    counts stay in fetch order.

    Args:
        issues: Issues in fetch order
        min_upvotes: Minimum :+1: count to be ranked
        max_per_label: Cap applied to the enhancement and bug groups

    Returns:
        RankedReport with the label groups and the uncapped full ranking
    """
    popular = [issue for issue in issues if issue.upvotes >= min_upvotes]
    popular.sort(key=lambda issue: issue.upvotes, reverse=True)

    return RankedReport(
        enhancement_issues=top_issues_by_label(ENHANCEMENT_LABEL, popular, max_per_label),
        bug_issues=top_issues_by_label(BUG_LABEL, popular, max_per_label),
        all_issues=popular,
    )
