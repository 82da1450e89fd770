"""
Tests for the tagsnap command.
"""

import subprocess
import pytest
from unittest.mock import MagicMock, patch
from click.testing import CliRunner

from tagsnap.cli import cli
from tagsnap.exit_codes import CONFIG_ERROR, GIT_ERROR, INTERRUPTED, TAG_NOT_FOUND
from tagsnap.infra.git_client import GitClient


TAGS = ["v0.1.0", "v0.2.0", "v0.3.0", "v0.4.0"]


@pytest.fixture
def config(tmp_path):
    (tmp_path / "source").mkdir()
    (tmp_path / "tracking").mkdir()
    return {
        "source_repo_path": str(tmp_path / "source"),
        "tracking_repo_path": str(tmp_path / "tracking"),
        "ledger": {"backend": "history", "path": str(tmp_path / "processed.json")},
        "logging": {"level": "INFO"},
    }


@pytest.fixture
def mock_git_client():
    client = MagicMock(spec=GitClient)
    client.tags.return_value = TAGS
    client.log_grep.return_value = ([], True)
    client.has_uncommitted_changes.return_value = True
    client.commit.return_value = ""
    return client


@pytest.fixture
def invoke(config, mock_git_client):
    """Invoke the CLI against a mocked git client."""
    def _invoke(args):
        runner = CliRunner()
        with patch('tagsnap.cli.load_config', return_value=config), \
                patch('tagsnap.services.collect_service.GitClient', return_value=mock_git_client):
            return runner.invoke(cli, args)
    return _invoke


def _checked_out(client):
    return [c.args[1] for c in client.checkout.call_args_list]


class TestCollectCommand:
    """Tests for the tagsnap command through CliRunner."""

    def test_help(self):
        result = CliRunner().invoke(cli, ['--help'])

        assert result.exit_code == 0
        assert '--start-from' in result.output
        assert '--limit' in result.output

    def test_full_run(self, invoke, mock_git_client):
        result = invoke([])

        assert result.exit_code == 0, result.output
        assert 'Found 4 v0.* tags' in result.output
        assert '[1/4] Processing v0.1.0...' in result.output
        assert '[4/4] Processing v0.4.0...' in result.output
        assert 'Collection complete!' in result.output
        assert _checked_out(mock_git_client) == TAGS + ["main"]

    def test_limit(self, invoke, mock_git_client):
        result = invoke(['--limit=2'])

        assert result.exit_code == 0, result.output
        assert 'Limiting to first 2 tags' in result.output
        assert '[2/2] Processing v0.2.0...' in result.output
        assert _checked_out(mock_git_client) == ["v0.1.0", "v0.2.0", "main"]

    def test_limit_larger_than_tag_count(self, invoke, mock_git_client):
        result = invoke(['--limit=50'])

        assert result.exit_code == 0
        assert _checked_out(mock_git_client) == TAGS + ["main"]

    def test_start_from(self, invoke, mock_git_client):
        result = invoke(['--start-from=v0.3.0'])

        assert result.exit_code == 0, result.output
        assert 'Starting from v0.3.0 (2 tags to process)' in result.output
        assert _checked_out(mock_git_client) == ["v0.3.0", "v0.4.0", "main"]

    def test_start_from_with_limit(self, invoke, mock_git_client):
        result = invoke(['--start-from=v0.2.0', '--limit=1'])

        assert result.exit_code == 0
        assert _checked_out(mock_git_client) == ["v0.2.0", "main"]

    def test_start_from_unknown_tag(self, invoke, mock_git_client):
        """Test that an unknown start tag exits non-zero before any checkout."""
        result = invoke(['--start-from=v0.9.9'])

        assert result.exit_code == TAG_NOT_FOUND
        assert 'Found 4 v0.* tags' in result.output
        assert 'Version v0.9.9 not found' in result.output
        assert result.output.index('Found 4 v0.* tags') < result.output.index('Version v0.9.9 not found')
        mock_git_client.checkout.assert_not_called()
        mock_git_client.commit.assert_not_called()

    def test_invalid_limit(self, invoke, mock_git_client):
        result = invoke(['--limit=0'])

        assert result.exit_code == 2
        mock_git_client.tags.assert_not_called()

    def test_non_numeric_limit(self, invoke):
        result = invoke(['--limit=abc'])
        assert result.exit_code == 2

    def test_tag_enumeration_failure(self, invoke, mock_git_client):
        mock_git_client.tags.side_effect = subprocess.CalledProcessError(
            128, "git tag --sort=creatordate", stderr="fatal: not a git repository"
        )

        result = invoke([])

        assert result.exit_code == GIT_ERROR
        assert 'not a git repository' in result.output
        mock_git_client.checkout.assert_not_called()

    def test_per_tag_failure_exits_zero(self, invoke, mock_git_client):
        """Test that a failing tag is logged and the run still succeeds."""
        def checkout(path, ref):
            if ref == "v0.2.0":
                raise subprocess.CalledProcessError(1, "git checkout v0.2.0")

        mock_git_client.checkout.side_effect = checkout

        result = invoke([])

        assert result.exit_code == 0
        assert '[3/4] Processing v0.3.0...' in result.output
        assert _checked_out(mock_git_client)[-1] == "main"

    def test_restore_failure_is_fatal(self, invoke, mock_git_client):
        def checkout(path, ref):
            if ref == "main":
                raise subprocess.CalledProcessError(1, "git checkout main")

        mock_git_client.checkout.side_effect = checkout

        result = invoke(['--limit=1'])

        assert result.exit_code == GIT_ERROR
        assert 'Collection complete!' not in result.output

    def test_skipped_tags_reported(self, invoke, mock_git_client):
        mock_git_client.log_grep.return_value = (["abc1234 Add metadata for v0.1.0"], True)

        result = invoke(['--limit=1'])

        assert result.exit_code == 0
        assert 'Skipping (already processed)' in result.output
        assert _checked_out(mock_git_client) == ["main"]

    def test_config_error(self):
        from tagsnap.exit_codes import ConfigError

        with patch('tagsnap.cli.load_config', side_effect=ConfigError("Unknown ledger backend 'x'")):
            result = CliRunner().invoke(cli, [])

        assert result.exit_code == CONFIG_ERROR
        assert "Unknown ledger backend" in result.output

    def test_keyboard_interrupt(self, invoke, mock_git_client):
        """Test that Ctrl+C mid-run exits 130 after restoring the branch."""
        def checkout(path, ref):
            if ref == "v0.2.0":
                raise KeyboardInterrupt

        mock_git_client.checkout.side_effect = checkout

        result = invoke([])

        assert result.exit_code == INTERRUPTED
        assert 'Interrupted' in result.output
        assert 'Collection complete!' not in result.output
        assert _checked_out(mock_git_client) == ["v0.1.0", "v0.2.0", "main"]
