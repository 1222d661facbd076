"""Tests for GitHub client."""

import os
from datetime import datetime, timezone
from unittest.mock import Mock, patch

import pytest
from github.GithubException import GithubException, UnknownObjectException

from gh_milestones.github_client.client import GitHubClient
from gh_milestones.github_client.models import GitHubMilestone


def _pygithub_milestone(number: int = 1, state: str = "open") -> Mock:
    milestone = Mock()
    milestone.id = 1000 + number
    milestone.number = number
    milestone.title = f"Sprint {number}"
    milestone.description = "First sprint"
    milestone.updated_at = datetime(2020, 1, 1, 17, 0, tzinfo=timezone.utc)
    milestone.open_issues = 0
    milestone.closed_issues = 3
    milestone.state = state
    return milestone


class TestGitHubClient:
    """Test GitHubClient class."""

    @patch.dict(os.environ, {"GITHUB_TOKEN": "test_token"})
    def test_init_with_env_token(self) -> None:
        """Test initialization with environment token."""
        with patch("gh_milestones.github_client.client.Github") as mock_github:
            GitHubClient()
            mock_github.assert_called_once_with("test_token", per_page=100)

    def test_init_with_explicit_token(self) -> None:
        """Test initialization with explicit token."""
        with patch("gh_milestones.github_client.client.Github") as mock_github:
            GitHubClient(token="explicit_token")
            mock_github.assert_called_once_with("explicit_token", per_page=100)

    @patch.dict(os.environ, {}, clear=True)
    def test_init_without_token(self) -> None:
        """Test initialization without token raises error."""
        with pytest.raises(ValueError, match="GitHub token is required"):
            GitHubClient()

    @patch("gh_milestones.github_client.client.Github")
    def test_get_repository_success(self, mock_github_class: Mock) -> None:
        """Test successful repository retrieval."""
        mock_repo = Mock()
        mock_github = Mock()
        mock_github.get_repo.return_value = mock_repo
        mock_github_class.return_value = mock_github

        client = GitHubClient(token="test_token")
        result = client.get_repository("testorg", "testrepo")

        assert result == mock_repo
        mock_github.get_repo.assert_called_once_with("testorg/testrepo")

    @patch("gh_milestones.github_client.client.Github")
    def test_get_repository_not_found(self, mock_github_class: Mock) -> None:
        """Test repository not found error."""
        mock_github = Mock()
        mock_github.get_repo.side_effect = UnknownObjectException(
            404, "Not Found", None
        )
        mock_github_class.return_value = mock_github

        client = GitHubClient(token="test_token")

        with pytest.raises(ValueError, match="Repository testorg/testrepo not found"):
            client.get_repository("testorg", "testrepo")


class TestListMilestones:
    """Test milestone listing."""

    @patch("gh_milestones.github_client.client.Github")
    def test_list_milestones_converts_page(self, mock_github_class: Mock) -> None:
        """Test a page of PyGitHub milestones is converted to our model."""
        mock_repo = Mock()
        mock_repo.get_milestones.return_value.get_page.return_value = [
            _pygithub_milestone(1),
            _pygithub_milestone(2),
        ]
        mock_github = Mock()
        mock_github.get_repo.return_value = mock_repo
        mock_github_class.return_value = mock_github

        client = GitHubClient(token="test_token")
        repository = client.get_repository("testorg", "testrepo")
        milestones = client.list_milestones(repository, page=1)

        assert [m.number for m in milestones] == [1, 2]
        assert isinstance(milestones[0], GitHubMilestone)
        assert milestones[0].closed_issues == 3
        mock_repo.get_milestones.assert_called_once_with(state="open")
        mock_repo.get_milestones.return_value.get_page.assert_called_once_with(0)

    @patch("gh_milestones.github_client.client.Github")
    def test_list_milestones_maps_page_number(self, mock_github_class: Mock) -> None:
        """Test 1-based page numbers map to PyGitHub's 0-based pages."""
        mock_repo = Mock()
        mock_repo.get_milestones.return_value.get_page.return_value = []
        mock_github = Mock()
        mock_github.get_repo.return_value = mock_repo
        mock_github_class.return_value = mock_github

        client = GitHubClient(token="test_token")
        milestones = client.list_milestones(mock_repo, page=3)

        assert milestones == []
        mock_repo.get_milestones.return_value.get_page.assert_called_once_with(2)

    @patch("gh_milestones.github_client.client.Github")
    def test_list_milestones_rejects_page_zero(self, mock_github_class: Mock) -> None:
        """Test page numbers start at 1."""
        client = GitHubClient(token="test_token")

        with pytest.raises(ValueError, match="Page numbers start at 1"):
            client.list_milestones(Mock(), page=0)

    @patch("gh_milestones.github_client.client.Github")
    def test_list_milestones_propagates_api_errors(
        self, mock_github_class: Mock
    ) -> None:
        """Test API failures are not swallowed."""
        mock_repo = Mock()
        mock_repo.get_milestones.return_value.get_page.side_effect = GithubException(
            401, {"message": "Bad credentials"}, None
        )
        mock_github = Mock()
        mock_github.get_repo.return_value = mock_repo
        mock_github_class.return_value = mock_github

        client = GitHubClient(token="test_token")

        with pytest.raises(GithubException):
            client.list_milestones(mock_repo)
