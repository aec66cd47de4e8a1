"""
Tests for the gomoji command line.

Git is replaced by a fake runner; nothing is committed. Run with:
    pytest tests/test_cli.py -v
"""

import inspect
import io
import json
import subprocess

import pytest

import gomoji.cli.main as cli_main
from gomoji.cli.args import complete_codes, parse_args
from gomoji.config import Config
from gomoji.git import GitError, GitResult, GitRunner


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

class FakeRunner:
    """Stands in for GitRunner and records commits."""
    calls = []
    result = GitResult(stdout="[main abc123] :bug: [fix] corrige", stderr="", exit_code=0)

    def commit(self, args):
        FakeRunner.calls.append(args)
        return FakeRunner.result


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


@pytest.fixture(autouse=True)
def cli_env(monkeypatch):
    """Plain output, default config, fake git, non-interactive stdin."""
    monkeypatch.setattr("gomoji.output.COLORS_ENABLED", False)
    monkeypatch.setattr(cli_main, "load_config", lambda: Config())
    monkeypatch.setattr(cli_main, "GitRunner", FakeRunner)
    monkeypatch.setattr(cli_main.sys, "stdin", io.StringIO())
    monkeypatch.delenv("GOMOJI_LOCALE", raising=False)
    monkeypatch.delenv("GOMOJI_CATALOG", raising=False)
    FakeRunner.calls = []
    FakeRunner.result = GitResult(stdout="[main abc123] :bug: [fix] corrige", stderr="", exit_code=0)


@pytest.fixture
def answers(monkeypatch):
    """Feed scripted answers to input() on an interactive stdin."""
    def _feed(*replies):
        monkeypatch.setattr(cli_main.sys, "stdin", FakeTTY())
        it = iter(replies)
        monkeypatch.setattr("builtins.input", lambda prompt="": next(it))
    return _feed


@pytest.fixture
def catalog_file(tmp_path):
    def _write(text):
        path = tmp_path / "gitmojis.json"
        path.write_text(text, encoding='utf-8')
        return str(path)
    return _write


def _entry(code):
    return {"emoji": "🐛", "entity": "&#x1f41b;", "code": code, "description": "Fix a bug.",
            "descEs": "Corrige un error.", "name": "bug", "semver": "patch"}


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

class TestArgs:

    def test_main_module_is_importable(self):
        assert inspect.ismodule(cli_main)
        assert callable(cli_main.main)
        assert cli_main.main.__module__ == "gomoji.cli.main"

    def test_defaults(self):
        args = parse_args([])
        assert args.subject is None
        assert args.message == []
        assert args.check is None

    def test_repeatable_message(self):
        args = parse_args(["-e", ":bug:", "-s", "fix", "asunto", "-m", "uno", "-m", "dos"])
        assert args.emoji == ":bug:"
        assert args.message == ["uno", "dos"]

    def test_scope_choices(self, capsys):
        with pytest.raises(SystemExit):
            parse_args(["-s", "wip"])

    def test_check_without_file(self):
        assert parse_args(["--check"]).check == ""

    def test_code_completion(self):
        assert ":sparkles:" in complete_codes(":sp")
        assert all(code.startswith(":b") for code in complete_codes(":b"))


# ---------------------------------------------------------------------------
# Non-interactive composition
# ---------------------------------------------------------------------------

class TestCompose:

    def test_dry_run_previews_only(self, capsys):
        code = cli_main.main(["-e", ":bug:", "-s", "fix", "corrige el login", "--dry-run"])
        out = capsys.readouterr().out

        assert code == 0
        assert "Previsualización" in out
        assert ":bug: [fix] corrige el login" in out
        assert FakeRunner.calls == []

    def test_yes_commits(self, capsys):
        code = cli_main.main(["-e", ":bug:", "-s", "fix", "corrige el login", "-m", " detalle ", "-y"])
        out = capsys.readouterr().out

        assert code == 0
        assert FakeRunner.calls == [['commit', '-m', ':bug: [fix] corrige el login', '-m', 'detalle']]
        assert "Commit creado" in out

    def test_without_confirmation_does_not_commit(self):
        assert cli_main.main(["-e", ":bug:", "-s", "fix", "corrige el login"]) == 0
        assert FakeRunner.calls == []

    def test_git_failure(self, capsys):
        FakeRunner.result = GitResult(stdout="", stderr="nothing to commit", exit_code=1)
        assert cli_main.main(["-e", ":bug:", "-s", "fix", "corrige el login", "-y"]) == 1
        assert "nothing to commit" in capsys.readouterr().out

    def test_git_unavailable(self, monkeypatch, capsys):
        def _raise():
            raise GitError("Not inside a git repository")
        monkeypatch.setattr(cli_main, "GitRunner", _raise)
        assert cli_main.main(["-e", ":bug:", "-s", "fix", "corrige el login", "-y"]) == 1
        assert "Not inside a git repository" in capsys.readouterr().err

    @pytest.mark.parametrize("argv, expected", [
        (["-s", "fix", "asunto"], "--emoji"),
        (["-e", ":bug:", "asunto"], "--scope"),
        (["-e", ":bug:", "-s", "fix"], "asunto"),
        (["-e", ":nope:", "-s", "fix", "asunto"], ":nope:"),
        (["-e", ":bug:", "-s", "fix", "no"], "entre 3 y 50"),
    ])
    def test_invalid_input(self, argv, expected, capsys):
        assert cli_main.main(argv) == 1
        err = capsys.readouterr().err
        assert "Ha ocurrido un error:" in err
        assert expected in err


# ---------------------------------------------------------------------------
# Interactive composition
# ---------------------------------------------------------------------------

class TestInteractive:

    def test_full_flow(self, answers, capsys):
        # emoji #4 (:bug:), scope #5 (fix), bad subject, good subject, body, confirm
        answers("4", "5", "x", "corrige el login", "s", "  línea uno ", "", "y")
        assert cli_main.main([]) == 0

        out = capsys.readouterr().out
        assert "╔══╗0" in out
        assert "entre 3 y 50" in out
        assert FakeRunner.calls == [['commit', '-m', ':bug: [fix] corrige el login', '-m', 'línea uno']]

    def test_quit_at_emoji(self, answers, capsys):
        answers("q")
        assert cli_main.main([]) == 0
        assert "Cancelled." in capsys.readouterr().out
        assert FakeRunner.calls == []

    def test_out_of_range_choice_reasks(self, answers, capsys):
        answers("999", "abc", "4", "q")
        assert cli_main.main([]) == 0
        assert "Enter 1-" in capsys.readouterr().out

    def test_decline_commit(self, answers, capsys):
        # no body, then decline the commit
        answers("n", "n")
        assert cli_main.main(["-e", ":bug:", "-s", "fix", "corrige el login"]) == 0
        assert "Commit no creado." in capsys.readouterr().out
        assert FakeRunner.calls == []


# ---------------------------------------------------------------------------
# Catalog commands
# ---------------------------------------------------------------------------

class TestCatalogCommands:

    def test_list(self, capsys):
        assert cli_main.main(["--list"]) == 0
        out = capsys.readouterr().out
        assert ":sparkles:" in out
        assert "(minor)" in out
        assert "refactor - " in out

    def test_check_bundled(self, capsys):
        assert cli_main.main(["--check"]) == 0
        assert "gitmojis" in capsys.readouterr().out

    def test_check_reports_diagnostic(self, catalog_file, capsys):
        path = catalog_file(json.dumps({"gitmojis": [_entry(":bug:")]}) + "{}")
        assert cli_main.main(["--check", path]) == 1
        assert "único valor JSON" in capsys.readouterr().err

    def test_check_reports_path_in_english(self, catalog_file, capsys):
        path = catalog_file(json.dumps({"gitmojis": [dict(_entry(":bug:"), code=7)]}))
        assert cli_main.main(["--check", path, "--locale", "en"]) == 1
        err = capsys.readouterr().err
        assert "incorrect JSON type for field `code`" in err
        assert "gitmojis[0].code" in err

    def test_check_reports_duplicates(self, catalog_file, capsys):
        path = catalog_file(json.dumps({"gitmojis": [_entry(":bug:"), _entry(":bug:")]}))
        assert cli_main.main(["--check", path]) == 1
        assert "Duplicate codes: :bug:" in capsys.readouterr().out

    def test_check_missing_file(self, tmp_path, capsys):
        assert cli_main.main(["--check", str(tmp_path / "nope.json")]) == 1
        assert "Could not read" in capsys.readouterr().err

    def test_broken_catalog_aborts(self, catalog_file, capsys):
        path = catalog_file("")
        assert cli_main.main(["--catalog", path, "--list"]) == 1
        assert "el texto no debe estar vacío" in capsys.readouterr().err

    def test_empty_catalog_aborts(self, catalog_file, capsys):
        path = catalog_file(json.dumps({"gitmojis": []}))
        assert cli_main.main(["--catalog", path, "--list"]) == 1
        assert "vacío" in capsys.readouterr().err

    @pytest.mark.parametrize("flags", [["--catalog", "{path}", "--list"], ["--check", "{path}"]])
    def test_undecodable_catalog_is_reported(self, tmp_path, capsys, flags):
        path = tmp_path / "gitmojis.json"
        path.write_bytes(b'{"gitmojis": [\xff]}')
        assert cli_main.main([flag.format(path=path) for flag in flags]) == 1
        assert "mal formado (en el carácter 14)" in capsys.readouterr().err

    def test_env_catalog_and_locale(self, catalog_file, monkeypatch, capsys):
        monkeypatch.setenv("GOMOJI_CATALOG", catalog_file("[]"))
        monkeypatch.setenv("GOMOJI_LOCALE", "en")
        assert cli_main.main(["--list"]) == 1
        assert "incorrect JSON type (at character `0`)" in capsys.readouterr().err

    def test_custom_catalog_is_used(self, catalog_file, capsys):
        path = catalog_file(json.dumps({"gitmojis": [_entry(":custom:")]}))
        assert cli_main.main(["--catalog", path, "--verbose", "-e", ":custom:", "-s", "fix",
                              "asunto bueno", "--dry-run"]) == 0
        out = capsys.readouterr().out
        assert "(1 gitmojis)" in out
        assert ":custom: [fix] asunto bueno" in out

    def test_display_config(self, capsys):
        assert cli_main.main(["--display-config"]) == 0
        assert "Current Configuration" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# GitRunner
# ---------------------------------------------------------------------------

class TestGitRunner:

    def _fake_run(self, monkeypatch, returncodes):
        calls = []

        def _run(cmd, **kwargs):
            calls.append(cmd)
            code = returncodes.get(cmd[1], 0)
            return subprocess.CompletedProcess(cmd, code, stdout="out", stderr="err")

        monkeypatch.setattr("gomoji.git.runner.subprocess.run", _run)
        return calls

    def test_commit_passes_arguments(self, monkeypatch):
        calls = self._fake_run(monkeypatch, {})
        result = GitRunner().commit(['commit', '-m', 'x'])
        assert calls[-1] == ['git', 'commit', '-m', 'x']
        assert result.ok
        assert result.stdout == "out"

    def test_not_a_repository(self, monkeypatch):
        self._fake_run(monkeypatch, {'rev-parse': 128})
        with pytest.raises(GitError, match="Not inside a git repository"):
            GitRunner()

    def test_git_missing(self, monkeypatch):
        def _run(cmd, **kwargs):
            raise FileNotFoundError(cmd[0])
        monkeypatch.setattr("gomoji.git.runner.subprocess.run", _run)
        with pytest.raises(GitError, match="not installed"):
            GitRunner()
