"""Tests for gloss.cli."""

from __future__ import annotations

import json

import pytest

from gloss import cli


@pytest.fixture(autouse=True)
def no_user_config(monkeypatch, tmp_path):
    monkeypatch.setenv("GLOSS_CONFIG", str(tmp_path / "missing.json"))
    monkeypatch.chdir(tmp_path)


class TestParseArgs:
    def test_annotate(self):
        args = cli.parse_args(["annotate", "--category", "file", "a", "b"])
        assert args.action == "annotate"
        assert args.category == "file"
        assert args.candidates == ["a", "b"]

    def test_action_required(self):
        with pytest.raises(SystemExit):
            cli.parse_args([])


class TestClassify:
    def test_prompt(self, capsys):
        assert cli.main(["classify", "--prompt", "Describe variable (default car): "]) == 0
        assert capsys.readouterr().out.strip() == "variable"

    def test_command_beats_prompt(self, capsys):
        assert cli.main(["classify", "--command", "switch-to-buffer", "--prompt", "Describe variable: "]) == 0
        assert capsys.readouterr().out.strip() == "buffer"

    def test_host_category(self, capsys):
        assert cli.main(["classify", "--category", "unicode-name"]) == 0
        assert capsys.readouterr().out.strip() == "unicode-name"

    def test_unclassified(self, capsys):
        assert cli.main(["classify", "--prompt", "Yes or no? "]) == 1
        assert "unclassified" in capsys.readouterr().out


class TestAnnotate:
    def test_file(self, tmp_path, capsys):
        (tmp_path / "init.el").write_bytes(b"x" * 2048)
        assert cli.main(["annotate", "--category", "file", "init.el"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("init.el")
        assert "2.0K" in out

    def test_unannotated_candidate_printed_alone(self, capsys):
        assert cli.main(["annotate", "--category", "file", "missing.el"]) == 0
        assert capsys.readouterr().out.strip() == "missing.el"

    def test_light_table(self, capsys):
        assert cli.main(["annotate", "--category", "command", "--table", "light", "find-file"]) == 0
        assert capsys.readouterr().out.strip() == "find-file"

    def test_unknown_table(self, capsys):
        assert cli.main(["annotate", "--category", "file", "--table", "nope", "x"]) == 2
        assert "nope" in capsys.readouterr().out


class TestConfig:
    def test_config_option(self, tmp_path, capsys):
        path = tmp_path / "gloss.json"
        path.write_text(json.dumps({"command_categories": {"describe-variable": "face"}}))
        assert cli.main(["-c", str(path), "classify", "--command", "describe-variable"]) == 0
        assert capsys.readouterr().out.strip() == "face"

    def test_env_config(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "env.json"
        path.write_text(json.dumps({"prompt_categories": [["^Emoji", "emoji"]]}))
        monkeypatch.setenv("GLOSS_CONFIG", str(path))
        assert cli.main(["classify", "--prompt", "Emoji: "]) == 0
        assert capsys.readouterr().out.strip() == "emoji"

    def test_invalid_config(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"separator_width": "wide"}))
        assert cli.main(["-c", str(path), "classify"]) == 2
        out = " ".join(capsys.readouterr().out.split())
        assert "invalid configuration" in out
        assert "separator_width" in out


class TestRead:
    def test_prints_value(self, monkeypatch, capsys):
        calls = []

        def fake_read(host, provider):
            calls.append((host.session, provider.command))
            return "fill-column"

        monkeypatch.setattr(cli, "read_candidate", fake_read)
        assert cli.main(["read", "variable"]) == 0
        assert capsys.readouterr().out.strip() == "fill-column"
        assert calls == [(None, "describe-variable")]

    def test_cancelled(self, monkeypatch):
        def cancel(host, provider):
            raise EOFError

        monkeypatch.setattr(cli, "read_candidate", cancel)
        assert cli.main(["read", "file"]) == 1

    def test_unknown_kind(self):
        with pytest.raises(SystemExit):
            cli.parse_args(["read", "emoji"])
