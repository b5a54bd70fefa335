"""Tests for the mwgateway command line."""

import io
import sys
from pathlib import Path
from urllib.parse import parse_qs

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mwgateway import __version__
from mwgateway.cli import main

WIKI_URL = "https://wiki.example.com"


class TestTranscoderCommands:
    """Tests for the title conversion subcommands."""

    def test_to_uri(self, capsys):
        assert main(["to-uri", "Getting there & away"]) == 0
        assert capsys.readouterr().out == "Getting_there_%26_away\n"

    def test_to_wiki(self, capsys):
        assert main(["to-wiki", "getting_there_%26_away"]) == 0
        assert capsys.readouterr().out == "Getting there & away\n"

    def test_base_and_subpage(self, capsys):
        assert main(["base", "User:John/Sandbox/Draft"]) == 0
        assert main(["subpage", "User:John/Sandbox/Draft"]) == 0
        assert capsys.readouterr().out == "User:John\nDraft\n"

    def test_parent(self, capsys):
        assert main(["parent", "User:John/Sandbox/Draft"]) == 0
        assert capsys.readouterr().out == "User:John/Sandbox\n"

    def test_parent_without_subpage(self, capsys):
        """A title without a parent should print nothing and fail."""
        assert main(["parent", "Main Page"]) == 1
        assert capsys.readouterr().out == ""


class TestUrlCommand:
    """Tests for the url subcommand."""

    def test_prints_page_url(self, capsys):
        assert main(["--url", WIKI_URL, "url", "Help:Getting there & away"]) == 0
        out = capsys.readouterr().out
        assert out == f"{WIKI_URL}/wiki/Help:Getting_there_%26_away\n"

    def test_reads_config_file(self, capsys, config_file):
        assert main(["--config", str(config_file), "url", "Main Page"]) == 0
        assert capsys.readouterr().out == f"{WIKI_URL}/wiki/Main_Page\n"

    def test_missing_url(self, capsys):
        """Without a wiki URL the command should fail with an error."""
        assert main(["url", "Main Page"]) == 1
        assert "ERROR:" in capsys.readouterr().err

    def test_bad_config_file(self, capsys, tmp_path):
        assert main(["--config", str(tmp_path / "missing.json"), "url", "Main Page"]) == 1
        assert "not found" in capsys.readouterr().err

    def test_bad_log_level(self):
        with pytest.raises(SystemExit) as exc:
            main(["--url", WIKI_URL, "--log-level", "loud", "url", "Main Page"])
        assert exc.value.code == 2

    def test_writes_log_file(self, tmp_path, capsys):
        log_dir = tmp_path / "logs"
        assert main(["--url", WIKI_URL, "--log-dir", str(log_dir), "url", "Main Page"]) == 0
        assert (log_dir / "wiki-mwgateway.log").exists()


class TestCreateCommand:
    """Tests for the create subcommand."""

    def test_prints_prepared_request(self, capsys, monkeypatch):
        """create should read stdin and print the unsent edit request."""
        monkeypatch.setattr(sys, "stdin", io.StringIO("Hello & welcome"))
        assert main(["--url", WIKI_URL, "create", "-a", "Sandbox", "-s", "test"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == f"POST {WIKI_URL}/api.php"
        body = parse_qs(lines[1])
        assert body["title"] == ["Sandbox"]
        assert body["text"] == ["Hello & welcome"]
        assert body["summary"] == ["test"]
        assert body["createonly"] == ["1"]

    def test_overwrite(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.StringIO("Hello"))
        assert main(["--url", WIKI_URL, "create", "-a", "Sandbox", "--overwrite"]) == 0
        body = parse_qs(capsys.readouterr().out.splitlines()[1])
        assert "createonly" not in body

    def test_article_is_mandatory(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.StringIO("Hello"))
        with pytest.raises(SystemExit) as exc:
            main(["--url", WIKI_URL, "create"])
        assert exc.value.code == 2


class TestGeneral:
    """Tests for top-level options."""

    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "usage:" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out
