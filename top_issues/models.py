"""Pydantic models for fetched issues, rankings and run configuration."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

THUMBS_UP = "+1"


class GitHubIssue(BaseModel):
    """Model representing an open GitHub issue."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(gt=0)
    url: str
    labels: List[str] = Field(default_factory=list)
    reactions: Dict[str, int] = Field(default_factory=dict)
    state: str = "open"

    def reaction_count(self, kind: str) -> int:
        """
        Return the tally for a reaction kind.

        A kind missing from ``reactions`` counts as zero, so issues fetched
        without reaction data are simply ranked last instead of failing.
        """
        return self.reactions.get(kind, 0)

    @property
    def upvotes(self) -> int:
        """Number of :+1: reactions."""
        return self.reaction_count(THUMBS_UP)


class RankedReport(BaseModel):
    """Issues grouped for the ranking report, most upvoted first."""

    enhancement_issues: List[GitHubIssue] = Field(default_factory=list)
    bug_issues: List[GitHubIssue] = Field(default_factory=list)
    all_issues: List[GitHubIssue] = Field(default_factory=list)


class ReportConfig(BaseModel):
    """Everything a single reporting run needs, resolved up front."""

    model_config = ConfigDict(str_strip_whitespace=True)

    owner: str = Field(min_length=1, description="Owner of the target repository")
    repo: str = Field(min_length=1, description="Target repository name")
    issue_number: int = Field(gt=0, description="Issue whose body is overwritten")
    token: Optional[str] = Field(default=None, repr=False, description="GitHub token")
    min_upvotes: int = Field(default=2, ge=0, description="Minimum :+1: count to be listed")
    max_per_label: int = Field(default=20, ge=0, description="Cap for each label group")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"
