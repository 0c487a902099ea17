"""GitHub API integration for listing open issues and updating the report issue."""

from typing import Any, Dict, List, Optional, Type

from github import Auth, Github
from github.GithubException import GithubException
from requests.exceptions import RequestException
from rich.console import Console

from .exceptions import GitHubRateLimitExceeded, PublishError, TopIssuesError, TransportError
from .models import GitHubIssue

console = Console()

PAGE_SIZE = 100


def label_name(label: Any) -> str:
    """Return the name of a label given as a plain string, a dict or a Label object."""
    if isinstance(label, str):
        return label
    if isinstance(label, dict):
        return label.get("name") or ""
    return getattr(label, "name", None) or str(label)


def reaction_counts(reactions: Any) -> Dict[str, int]:
    """Keep only the integer tallies of a reactions payload."""
    if not isinstance(reactions, dict):
        return {}
    return {
        kind: count
        for kind, count in reactions.items()
        if isinstance(count, int) and not isinstance(count, bool)
    }


class GitHubClient:
    """Reads open issues from a repository and rewrites the report issue."""

    def __init__(self, token: Optional[str] = None):
        """
        Initialize GitHub client.

        Args:
            token: GitHub personal access token; reads work without one,
                updating the report issue does not
        """
        if token:
            self.github = Github(auth=Auth.Token(token), per_page=PAGE_SIZE, lazy=True, retry=None)
        else:
            self.github = Github(per_page=PAGE_SIZE, lazy=True, retry=None)

    @staticmethod
    def _convert_error(
        error: Exception,
        error_cls: Type[TopIssuesError],
        action: str
    ) -> TopIssuesError:
        """Convert GitHub and transport exceptions into reporter errors."""
        if not isinstance(error, GithubException):
            return error_cls(f"{action} failed: {error}")

        message = ""
        if isinstance(error.data, dict):
            message = error.data.get("message", "") or ""
        elif error.args:
            message = str(error.args[0])

        status = error.status
        message_lower = message.lower()
        if (
            status == 429
            or "rate limit" in message_lower
            or "abuse detection" in message_lower
        ):
            if error_cls is TransportError:
                return GitHubRateLimitExceeded(message or "GitHub API rate limit exceeded")
            return error_cls(f"{action} failed: rate limited ({message or status})")

        return error_cls(f"{action} failed with status {status}: {message or 'no message'}")

    def _convert_issue(self, item: Dict[str, Any]) -> GitHubIssue:
        """Convert one issue of the list endpoint's JSON payload to our model."""
        return GitHubIssue(
            number=item["number"],
            url=item["html_url"],
            labels=[label_name(label) for label in item.get("labels") or []],
            reactions=reaction_counts(item.get("reactions")),
            state=item.get("state") or "open",
        )

    def _get_issue_page(self, full_name: str, page: int) -> List[Dict[str, Any]]:
        """Request one page of open issues as raw JSON."""
        # Plain JSON: an issue without reactions must not cost another request
        _, data = self.github.requester.requestJsonAndCheck(
            "GET",
            f"/repos/{full_name}/issues",
            parameters={"state": "open", "per_page": PAGE_SIZE, "page": page},
        )
        if not isinstance(data, list):
            raise TransportError(f"Expected a list of issues for {full_name}, got {type(data).__name__}")
        return data

    def fetch_open_issues(self, owner: str, repo: str) -> List[GitHubIssue]:
        """
        Fetch every open issue of a repository.

        Pages of ``PAGE_SIZE`` issues are requested one after another. A page
        holding fewer than ``PAGE_SIZE`` items is taken as the last one, so an
        exactly full last page costs one extra, empty request.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            Issues in page order, then in the order the API returned them

        Raises:
            TransportError: If any page request fails
        """
        full_name = f"{owner}/{repo}"
        console.print(f"[cyan]Fetching open issues from {full_name}...[/cyan]")

        results: List[GitHubIssue] = []
        page = 1
        try:
            while True:
                batch = self._get_issue_page(full_name, page)
                results.extend(self._convert_issue(item) for item in batch)
                if len(batch) < PAGE_SIZE:
                    break
                page += 1
        except (GithubException, RequestException) as exc:
            raise self._convert_error(
                exc, TransportError, f"Listing page {page} of open issues for {full_name}"
            ) from exc

        console.print(f"[green]Found {len(results)} open issues in {page} page(s)[/green]")
        return results

    def publish(self, owner: str, repo: str, issue_number: int, body: str) -> None:
        """
        Replace the body of an issue.

        Args:
            owner: Repository owner
            repo: Repository name
            issue_number: Issue to overwrite
            body: New issue body

        Raises:
            PublishError: If the issue cannot be read or updated
        """
        full_name = f"{owner}/{repo}"
        try:
            issue = self.github.get_repo(full_name).get_issue(issue_number)
            issue.edit(body=body)
        except (GithubException, RequestException) as exc:
            raise self._convert_error(
                exc, PublishError, f"Updating issue #{issue_number} in {full_name}"
            ) from exc

        console.print(f"[green]✓ Updated issue #{issue_number} in {full_name}[/green]")
