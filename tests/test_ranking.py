"""Tests for filtering, ordering and label grouping."""

from top_issues.models import GitHubIssue, RankedReport
from top_issues.ranking import has_label, rank, top_issues_by_label


class TestRank:
    """Test the rank function."""

    def test_drops_issues_below_threshold(self, make_issue) -> None:
        """Issues with fewer than two :+1: are excluded."""
        issues = [make_issue(1, 0), make_issue(2, 1), make_issue(3, 2), make_issue(4, 7)]

        report = rank(issues)

        assert [issue.number for issue in report.all_issues] == [4, 3]

    def test_missing_reactions_count_as_zero(self, make_issue) -> None:
        """An issue without a :+1: entry is excluded instead of failing."""
        issues = [make_issue(1), make_issue(2, 3)]

        report = rank(issues)

        assert [issue.number for issue in report.all_issues] == [2]

    def test_sorted_descending_and_stable(self, make_issue) -> None:
        """Equal counts keep their fetch order."""
        issues = [
            make_issue(1, 3),
            make_issue(2, 9),
            make_issue(3, 3),
            make_issue(4, 5),
            make_issue(5, 3),
        ]

        report = rank(issues)

        assert [issue.number for issue in report.all_issues] == [2, 4, 1, 3, 5]
        counts = [issue.upvotes for issue in report.all_issues]
        assert counts == sorted(counts, reverse=True)

    def test_label_groups(self, make_issue) -> None:
        """Label groups hold matching issues in ranking order."""
        issues = [
            make_issue(1, 5, labels=["bug"]),
            make_issue(2, 1, labels=["bug"]),
            make_issue(3, 3, labels=["enhancement"]),
            make_issue(4, 8, labels=["enhancement", "bug"]),
            make_issue(5, 4, labels=["docs"]),
        ]

        report = rank(issues)

        assert [issue.number for issue in report.bug_issues] == [4, 1]
        assert [issue.number for issue in report.enhancement_issues] == [4, 3]
        assert [issue.number for issue in report.all_issues] == [4, 1, 5, 3]

    def test_label_match_is_case_sensitive(self, make_issue) -> None:
        """Only the exact label name matches."""
        issues = [
            make_issue(1, 5, labels=["Bug"]),
            make_issue(2, 4, labels=["bugfix"]),
            make_issue(3, 3, labels=["Enhancement"]),
        ]

        report = rank(issues)

        assert report.bug_issues == []
        assert report.enhancement_issues == []
        assert len(report.all_issues) == 3

    def test_label_groups_capped_at_top_twenty(self, make_issue) -> None:
        """Only the twenty most upvoted labelled issues are kept."""
        issues = [make_issue(number, number + 1, labels=["bug"]) for number in range(1, 31)]

        report = rank(issues)

        assert len(report.bug_issues) == 20
        assert [issue.number for issue in report.bug_issues] == list(range(30, 10, -1))
        assert len(report.all_issues) == 30

    def test_empty_input(self) -> None:
        """No issues yields three empty groups."""
        assert rank([]) == RankedReport()

    def test_custom_threshold_and_cap(self, make_issue) -> None:
        """Threshold and cap can be overridden."""
        issues = [make_issue(n, n, labels=["enhancement"]) for n in range(1, 6)]

        report = rank(issues, min_upvotes=3, max_per_label=2)

        assert [issue.number for issue in report.all_issues] == [5, 4, 3]
        assert [issue.number for issue in report.enhancement_issues] == [5, 4]

    def test_input_issues_not_mutated(self, make_issue) -> None:
        """Ranking leaves the fetched list untouched."""
        issues = [make_issue(1, 2), make_issue(2, 6)]

        rank(issues)

        assert [issue.number for issue in issues] == [1, 2]


class TestLabelHelpers:
    """Test label matching helpers."""

    def test_has_label(self, make_issue) -> None:
        issue = make_issue(1, 2, labels=["bug", "ui"])
        assert has_label("ui", issue)
        assert not has_label("UI", issue)

    def test_top_issues_by_label_keeps_order(self, make_issue) -> None:
        issues = [
            make_issue(1, 9, labels=["bug"]),
            make_issue(2, 8),
            make_issue(3, 7, labels=["bug"]),
        ]
        result = top_issues_by_label("bug", issues, limit=5)
        assert [issue.number for issue in result] == [1, 3]


class TestGitHubIssue:
    """Test the reaction accessor."""

    def test_reaction_count_defaults_to_zero(self) -> None:
        issue = GitHubIssue(number=1, url="https://example.com/1")
        assert issue.reaction_count("+1") == 0
        assert issue.upvotes == 0

    def test_reaction_count(self) -> None:
        issue = GitHubIssue(number=1, url="https://example.com/1", reactions={"+1": 4, "heart": 2})
        assert issue.upvotes == 4
        assert issue.reaction_count("heart") == 2
        assert issue.reaction_count("rocket") == 0
