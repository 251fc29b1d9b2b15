"""Unit tests for the issues resource."""

from __future__ import annotations

import warnings

import pytest

from sonarqube.web.core import ValidationError, ValidationReason
from sonarqube.web.resources.issues import (
    FacetMode,
    ImpactSeverity,
    IssueResponse,
    IssuesClient,
    SearchIssuesResponse,
)

ISSUE = {
    "key": "AX-1",
    "rule": "python:S1192",
    "component": "my-app:src/app.py",
    "project": "my-app",
    "line": 12,
    "textRange": {"startLine": 12, "endLine": 12, "startOffset": 4, "endOffset": 20},
    "message": "Define a constant instead of duplicating this literal",
    "issueStatus": "OPEN",
    "impacts": [{"softwareQuality": "MAINTAINABILITY", "severity": "HIGH"}],
    "tags": ["design"],
}


@pytest.fixture
def issues(runner):
    return IssuesClient(runner)


class TestSearchIssues:
    """Test issue search parameters and parsing."""

    @pytest.mark.asyncio
    async def test_parses_issue_page(self, issues, transport):
        transport.get.return_value = {
            "paging": {"pageIndex": 1, "pageSize": 100, "total": 1},
            "issues": [ISSUE],
            "facets": [{"property": "severities", "values": [{"val": "HIGH", "count": 1}]}],
        }

        response = await issues.search().projects(["my-app"]).execute()

        assert isinstance(response, SearchIssuesResponse)
        issue = response.issues[0]
        assert issue.issue_status == "OPEN"
        assert issue.text_range.start_offset == 4
        assert issue.impacts[0].software_quality == "MAINTAINABILITY"
        assert response.facets[0].values[0].count == 1

    @pytest.mark.asyncio
    async def test_list_filters_comma_joined(self, issues, transport):
        await (
            issues.search()
            .components(["a", "b"])
            .impact_severities([ImpactSeverity.HIGH, "BLOCKER"])
            .assigned(False)
            .facets(["impactSeverities", "rules"])
            .facet_mode(FacetMode.EFFORT)
            .execute()
        )

        assert transport.get.call_args.kwargs["params"] == [
            ("componentKeys", "a,b"),
            ("impactSeverities", "HIGH,BLOCKER"),
            ("assigned", "false"),
            ("facets", "impactSeverities,rules"),
            ("facetMode", "effort"),
        ]

    @pytest.mark.asyncio
    async def test_sort(self, issues, transport):
        await issues.search().sort("CREATION_DATE", ascending=False).execute()
        params = transport.get.call_args.kwargs["params"]
        assert params == [("s", "CREATION_DATE"), ("asc", "false")]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "configure",
        [
            lambda b: b.created_at("2026-01-01").created_after("2025-12-01"),
            lambda b: b.created_at("2026-01-01").created_before("2026-02-01"),
            lambda b: b.created_at("2026-01-01").created_in_last("1m"),
            lambda b: b.created_after("2026-01-01").created_in_last("1w"),
            lambda b: b.branch("main").pull_request("42"),
        ],
    )
    async def test_mutually_exclusive_filters(self, issues, transport, configure):
        """Test conflicting date and branch filters fail before any request."""
        with pytest.raises(ValidationError) as exc_info:
            await configure(issues.search()).execute()
        assert exc_info.value.reason == ValidationReason.MUTUALLY_EXCLUSIVE
        transport.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_created_after_and_before_allowed(self, issues, transport):
        await issues.search().created_after("2026-01-01").created_before("2026-02-01").execute()
        transport.get.assert_called_once()

    @pytest.mark.asyncio
    async def test_invalid_enum_value(self, issues, transport):
        with pytest.raises(ValidationError) as exc_info:
            await issues.search().issue_statuses(["OPEN", "WONTFIX"]).execute()
        assert exc_info.value.reason == ValidationReason.INVALID_CHOICE
        assert exc_info.value.field == "issueStatuses"
        transport.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_page_size_cap(self, issues, transport):
        with pytest.raises(ValidationError):
            await issues.search().page_size(501).execute()
        transport.get.assert_not_called()

    @pytest.mark.parametrize(
        "setter,value",
        [
            ("statuses", ["OPEN"]),
            ("severities", ["MAJOR"]),
            ("types", ["BUG"]),
            ("resolutions", ["FIXED"]),
        ],
    )
    def test_deprecated_filters_warn(self, issues, setter, value):
        """Test legacy classification filters emit DeprecationWarning."""
        builder = issues.search()
        with pytest.warns(DeprecationWarning, match=setter):
            getattr(builder, setter)(value)
        assert len(builder.params) == 1

    def test_current_filters_do_not_warn(self, issues):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            issues.search().issue_statuses(["OPEN"]).impact_software_qualities(["SECURITY"])

    @pytest.mark.asyncio
    async def test_search_all(self, issues, transport):
        transport.get.side_effect = [
            {"paging": {"pageIndex": 1, "pageSize": 100, "total": 2}, "issues": [ISSUE, ISSUE]},
        ]
        items = [issue async for issue in issues.search_all()]
        assert len(items) == 2
        assert transport.get.call_count == 1


class TestIssueActions:
    @pytest.mark.asyncio
    async def test_add_comment(self, issues, transport):
        transport.post.return_value = {"issue": ISSUE}

        result = await issues.add_comment("AX-1", "Looks intentional")

        assert isinstance(result, IssueResponse)
        assert result.issue.key == "AX-1"
        transport.post.assert_called_once()
        assert transport.post.call_args.args == ("/api/issues/add_comment",)
        assert transport.post.call_args.kwargs["body"] == [
            ("issue", "AX-1"),
            ("text", "Looks intentional"),
        ]

    @pytest.mark.asyncio
    async def test_add_comment_requires_text(self, issues, transport):
        with pytest.raises(ValidationError):
            await issues.add_comment("AX-1", "")
        transport.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_assign_without_assignee_unassigns(self, issues, transport):
        transport.post.return_value = {"issue": ISSUE}
        await issues.assign("AX-1")
        assert transport.post.call_args.kwargs["body"] == [("issue", "AX-1")]

    @pytest.mark.asyncio
    async def test_do_transition(self, issues, transport):
        transport.post.return_value = {"issue": {**ISSUE, "issueStatus": "ACCEPTED"}}
        result = await issues.do_transition("AX-1", "accept")
        assert result.issue.issue_status == "ACCEPTED"
        assert transport.post.call_args.kwargs["body"] == [
            ("issue", "AX-1"),
            ("transition", "accept"),
        ]

    @pytest.mark.asyncio
    async def test_set_tags_empty_clears(self, issues, transport):
        """Test an empty tag list is still sent so the server removes tags."""
        transport.post.return_value = {"issue": {**ISSUE, "tags": []}}
        await issues.set_tags("AX-1", [])
        assert transport.post.call_args.kwargs["body"] == [("issue", "AX-1"), ("tags", "")]

    @pytest.mark.asyncio
    async def test_search_tags(self, issues, transport):
        transport.get.return_value = {"tags": ["cwe", "design"]}
        result = await issues.search_tags("de", project="my-app", page_size=10)

        assert result.tags == ["cwe", "design"]
        assert transport.get.call_args.kwargs["params"] == [
            ("q", "de"),
            ("project", "my-app"),
            ("ps", "10"),
        ]
