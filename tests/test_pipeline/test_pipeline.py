"""Tests for the end-to-end notification pipeline."""

from collections.abc import Callable, Iterator
from unittest.mock import Mock, patch

import pytest

from release_notifier.config import NotifierConfig
from release_notifier.errors import BoardResolutionError, RangeResolutionError
from release_notifier.github_client.models import PullRequest
from release_notifier.monday.client import MondayClient
from release_notifier.monday.models import TaskStatus
from release_notifier.pipeline import run_pipeline


@pytest.fixture
def mock_list_commits() -> Iterator[Mock]:
    """Patch git history access."""
    with patch("release_notifier.pipeline.list_commits") as mock_list:
        mock_list.return_value = ["abc1234", "def5678"]
        yield mock_list


@pytest.fixture
def github_client(make_pr: Callable[..., PullRequest]) -> Mock:
    """GitHub client whose commits all map to PR #42."""
    client = Mock()
    client.list_pull_requests_for_commit.return_value = [make_pr(42)]
    client.get_pull_request.return_value = make_pr(
        42, body="Ticket number: 111\nTicket number: 222"
    )
    return client


class TestRunPipeline:
    """Test run_pipeline function."""

    def test_full_run(
        self,
        config: NotifierConfig,
        mock_list_commits: Mock,
        github_client: Mock,
        monday_client: MondayClient,
        fake_monday,
    ) -> None:
        """Test a run resolving the board and updating every task."""
        fake_monday.queue(
            fake_monday.items("111", board_id="500"),
            fake_monday.item_page("111"),
            fake_monday.ok(),
            fake_monday.ok(),
            fake_monday.item_page("222"),
            fake_monday.ok(),
            fake_monday.ok(),
        )

        summary = run_pipeline(
            config, github_client=github_client, monday_client=monday_client
        )

        mock_list_commits.assert_called_once_with("v1.0.0..v1.1.0", cwd=None)
        assert [pr.number for pr in summary.pull_requests] == [42]
        assert summary.task_ids == ["111", "222"]
        assert summary.board is not None and summary.board.id == "500"
        assert summary.count(TaskStatus.SUCCESS) == 2
        assert fake_monday.variables()[1]["boardId"] == "500"

    def test_no_commits_skips_github(
        self, config: NotifierConfig, mock_list_commits: Mock, github_client: Mock
    ) -> None:
        """Test an empty range never queries pull requests."""
        mock_list_commits.return_value = []

        summary = run_pipeline(config, github_client=github_client)

        assert summary.commits == []
        github_client.list_pull_requests_for_commit.assert_not_called()

    def test_no_task_ids_ends_quietly(
        self,
        config: NotifierConfig,
        mock_list_commits: Mock,
        github_client: Mock,
        make_pr: Callable[..., PullRequest],
        monday_client: MondayClient,
        fake_monday,
    ) -> None:
        """Test PRs without ticket lines stop before monday.com."""
        github_client.get_pull_request.return_value = make_pr(42, body="No refs")

        summary = run_pipeline(
            config, github_client=github_client, monday_client=monday_client
        )

        assert summary.task_ids == []
        assert summary.outcomes == []
        assert fake_monday.requests == []

    def test_board_failure_is_fatal(
        self,
        config: NotifierConfig,
        mock_list_commits: Mock,
        github_client: Mock,
        monday_client: MondayClient,
        fake_monday,
    ) -> None:
        """Test no task is updated when the board cannot be resolved."""
        fake_monday.queue(fake_monday.errors("Item not found"))

        with patch("release_notifier.pipeline.TaskUpdater") as mock_updater:
            with pytest.raises(BoardResolutionError):
                run_pipeline(
                    config, github_client=github_client, monday_client=monday_client
                )

        mock_updater.assert_not_called()
        assert len(fake_monday.requests) == 1

    def test_configured_board_skips_resolution(
        self,
        config: NotifierConfig,
        mock_list_commits: Mock,
        github_client: Mock,
        monday_client: MondayClient,
        fake_monday,
    ) -> None:
        """Test an explicit board id is used without an items query."""
        config = config.model_copy(update={"board_id": "999", "dry_run": True})
        fake_monday.queue(fake_monday.item_page("1"), fake_monday.item_page())

        summary = run_pipeline(
            config, github_client=github_client, monday_client=monday_client
        )

        assert summary.board is not None and summary.board.id == "999"
        assert all(v["boardId"] == "999" for v in fake_monday.variables())
        assert [o.message for o in summary.outcomes] == ["dry run", "not found"]

    def test_range_failure_propagates(
        self, config: NotifierConfig, mock_list_commits: Mock, github_client: Mock
    ) -> None:
        """Test commit range errors are fatal."""
        mock_list_commits.side_effect = RangeResolutionError("bad range")

        with pytest.raises(RangeResolutionError):
            run_pipeline(config, github_client=github_client)

        github_client.list_pull_requests_for_commit.assert_not_called()

    def test_clients_built_from_config(
        self,
        config: NotifierConfig,
        mock_list_commits: Mock,
        github_client: Mock,
    ) -> None:
        """Test default clients receive the configured tokens."""
        with (
            patch(
                "release_notifier.pipeline.GitHubClient", return_value=github_client
            ) as mock_github_cls,
            patch("release_notifier.pipeline.MondayClient") as mock_monday_cls,
            patch("release_notifier.pipeline.resolve_board") as mock_resolve,
            patch("release_notifier.pipeline.TaskUpdater") as mock_updater_cls,
        ):
            mock_resolve.return_value.id = "500"
            mock_updater_cls.return_value.update.return_value = []

            run_pipeline(config)

        mock_github_cls.assert_called_once_with(token="github-token")
        mock_monday_cls.assert_called_once_with(
            "monday-token", api_url="https://api.monday.com/v2"
        )
        mock_resolve.assert_called_once_with(mock_monday_cls.return_value, "111")
        mock_updater_cls.return_value.update.assert_called_once_with(
            ["111", "222"], "1.2.3", "prod", "Spring release"
        )
        mock_monday_cls.return_value.close.assert_called_once()
