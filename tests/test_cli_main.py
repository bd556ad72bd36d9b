import json

import pytest
from click.testing import CliRunner

from commentboard.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


def test_cli_exposes_expected_commands(runner):
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command_name in ("list", "add", "feedback", "search", "serve"):
        assert command_name in result.output, f"{command_name} not listed in CLI help output"


def test_add_then_list(runner, tmp_path):
    result = runner.invoke(cli, ["--data-dir", str(tmp_path), "add", "hello"])
    assert result.exit_code == 0
    assert "Comment added" in result.output

    result = runner.invoke(cli, ["--data-dir", str(tmp_path), "list"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["hello"]


def test_add_blank_comment_is_rejected(runner, tmp_path):
    result = runner.invoke(cli, ["--data-dir", str(tmp_path), "add", "  "])

    assert result.exit_code != 0
    assert "Comment is required" in result.output
    assert not (tmp_path / "comments.json").exists()


def test_search(runner, tmp_path):
    (tmp_path / "comments.json").write_text(json.dumps(["Hello", "world", "Help"]), encoding="utf-8")

    result = runner.invoke(cli, ["--data-dir", str(tmp_path), "search", "hel"])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["Hello", "Help"]


def test_list_reports_corrupt_store(runner, tmp_path):
    (tmp_path / "comments.json").write_text("oops", encoding="utf-8")

    result = runner.invoke(cli, ["--data-dir", str(tmp_path), "list"])

    assert result.exit_code == 1
    assert "corrupt" in result.output


def test_feedback_command(runner, tmp_path):
    result = runner.invoke(cli, [
        "--data-dir", str(tmp_path), "feedback",
        "--name", "Ada", "--email", "ada@example.com", "--feedback", "Really useful board",
    ])

    assert result.exit_code == 0
    stored = json.loads((tmp_path / "feedback.json").read_text(encoding="utf-8"))
    assert stored == [{'name': 'Ada', 'email': 'ada@example.com', 'feedback': 'Really useful board'}]


def test_feedback_command_lists_every_field_error(runner, tmp_path):
    result = runner.invoke(cli, [
        "--data-dir", str(tmp_path), "feedback",
        "--name", "A", "--email", "bad", "--feedback", "short",
    ])

    assert result.exit_code == 1
    assert "name: Name must be at least 2 characters" in result.output
    assert "email: Invalid email format" in result.output
    assert "feedback: Feedback must be at least 10 characters" in result.output
