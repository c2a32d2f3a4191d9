import subprocess
import os
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
import notion_cli.__main__ as cli
import notion_cli.commands.auth as auth
import notion_cli.commands.database as database
import notion_cli.core.config as config

ROOT = Path(__file__).resolve().parents[1]


def _run(*argv, env=None):
    return subprocess.run(
        [sys.executable, "-m", "notion_cli", *argv],
        capture_output=True, text=True, cwd=ROOT, env=env,
    )


def test_cli_help():
    result = _run("--help")
    assert result.returncode == 0
    assert "{auth,page,database}" in result.stdout
    assert "toon" in result.stdout


def test_database_help():
    result = _run("database", "query", "--help")
    assert result.returncode == 0
    assert "--filter" in result.stdout
    assert "--sorts" in result.stdout


def test_missing_required_option_exits_nonzero():
    result = _run("page", "create", "--title", "x")
    assert result.returncode != 0
    assert "--parent" in result.stderr


def test_login_with_invalid_token_writes_nothing(tmp_path):
    # Nothing listens on port 9, so the token check fails without a real API
    env = {**os.environ, "HOME": str(tmp_path), "NOTION_BASE_URL": "http://127.0.0.1:9/v1"}
    env.pop("NOTION_TOKEN", None)
    result = _run("auth", "login", "ntn_bogus", env=env)
    assert result.returncode != 0
    assert "Invalid token" in result.stderr
    assert "ntn_bogus" not in result.stderr
    assert not (tmp_path / ".notion-cli" / "config.json").exists()


def test_unknown_format_is_rejected(capsys):
    code = cli.main(["--format", "yaml", "auth", "status"])
    assert code == 1
    assert "Unknown output format: yaml" in capsys.readouterr().err


def test_invalid_filter_fails_before_network(monkeypatch, capsys):
    def no_client():
        raise AssertionError("network client must not be created")

    monkeypatch.setattr(database, "create_client", no_client)
    code = cli.main(["database", "query", "db1", "--filter", "not-json"])
    assert code == 1
    err = capsys.readouterr().err
    assert "Invalid filter JSON" in err
    assert "databaseId: db1" in err


def test_login_invalid_token_in_process(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "config.json")
    monkeypatch.setattr(auth, "validate_token", lambda token: False)
    code = cli.main(["auth", "login", "bad-token"])
    assert code == 1
    assert "Invalid token" in capsys.readouterr().err
    assert not (tmp_path / "config.json").exists()


def test_login_logout_status(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "config.json")
    monkeypatch.setattr(auth, "validate_token", lambda token: token == "good")

    assert cli.main(["-f", "json", "auth", "login", "good"]) == 0
    assert json.loads(capsys.readouterr().out) == {
        "status": "success",
        "message": "Successfully authenticated",
    }
    assert json.loads((tmp_path / "config.json").read_text()) == {"notionToken": "good"}

    assert cli.main(["-f", "json", "auth", "status"]) == 0
    assert json.loads(capsys.readouterr().out)["authenticated"] is True

    assert cli.main(["-f", "plain", "auth", "logout"]) == 0
    assert "message: Successfully logged out" in capsys.readouterr().out
    assert not (tmp_path / "config.json").exists()

    assert cli.main(["auth", "logout"]) == 0
    assert capsys.readouterr().out.strip() == "status: info\tmessage: Not authenticated"

    assert cli.main(["-f", "json", "auth", "status"]) == 0
    assert json.loads(capsys.readouterr().out)["authenticated"] is False


def test_login_prompts_when_token_missing(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "config.json")
    monkeypatch.setattr(auth, "validate_token", lambda token: True)
    monkeypatch.setattr(auth, "prompt_token", lambda: "typed")
    assert cli.main(["auth", "login"]) == 0
    assert json.loads((tmp_path / "config.json").read_text()) == {"notionToken": "typed"}


def test_commands_require_login(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "config.json")
    monkeypatch.delenv("NOTION_TOKEN", raising=False)
    code = cli.main(["page", "list"])
    assert code == 1
    err = capsys.readouterr().err
    assert "Not authenticated" in err
    assert "limit: 100" in err


def test_group_without_subcommand_prints_help(capsys):
    assert cli.main(["page"]) == 0
    assert "list" in capsys.readouterr().out
