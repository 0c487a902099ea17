"""Test configuration and fixtures."""

from typing import Any, Callable, Dict, Optional, Sequence

import pytest

from top_issues.models import GitHubIssue


def issue_url(number: int) -> str:
    return f"https://github.com/octo-org/octo-repo/issues/{number}"


@pytest.fixture
def make_issue() -> Callable[..., GitHubIssue]:
    """Build GitHubIssue models with a given :+1: count and labels."""

    def _make(number: int, upvotes: Optional[int] = None, labels: Sequence[str] = ()) -> GitHubIssue:
        reactions = {} if upvotes is None else {"+1": upvotes}
        return GitHubIssue(
            number=number,
            url=issue_url(number),
            labels=list(labels),
            reactions=reactions,
        )

    return _make


@pytest.fixture
def make_raw_issue() -> Callable[..., Dict[str, Any]]:
    """Build issues as the list endpoint returns them in JSON."""

    def _make(number: int, upvotes: Optional[int] = None, labels: Sequence[str] = ()) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "url": f"https://api.github.com/repos/octo-org/octo-repo/issues/{number}",
            "html_url": issue_url(number),
            "number": number,
            "state": "open",
            "title": f"Issue {number}",
            "labels": [{"id": index, "name": label, "color": "ededed"} for index, label in enumerate(labels)],
        }
        if upvotes is not None:
            payload["reactions"] = {
                "url": f"https://api.github.com/repos/octo-org/octo-repo/issues/{number}/reactions",
                "total_count": upvotes,
                "+1": upvotes,
                "-1": 0,
                "heart": 0,
            }
        return payload

    return _make
