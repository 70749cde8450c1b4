"""Tests for the CLI module."""

from __future__ import annotations

import json

import pytest

from attrtext.cli import main


def _attributes(out: str) -> dict[str, dict]:
    data = json.loads(out)
    return {a["key"]: a for a in data["attributes"]}


class TestCLIMain:
    """Test the main() entry point."""

    def test_list_styles(self, capsys):
        ret = main(["--list-styles"])
        assert ret == 0
        out = capsys.readouterr().out
        assert "default" in out
        assert "academic" in out
        assert "heading_1" in out

    def test_missing_text(self):
        with pytest.raises(SystemExit):
            main([])

    def test_plain_text(self, capsys):
        ret = main(["Hello World"])
        assert ret == 0
        data = json.loads(capsys.readouterr().out)
        assert data == {"text": "Hello World", "length": 11, "attributes": []}

    def test_color_option(self, capsys):
        ret = main(["Hello World", "--color", "red", "--compact"])
        assert ret == 0
        out = capsys.readouterr().out
        assert out.count("\n") == 1
        attrs = _attributes(out)
        assert attrs["foreground_color"]["value"] == "#ff0000ff"
        assert attrs["foreground_color"]["range"] == [0, 11]

    def test_uppercase_and_alignment(self, capsys):
        ret = main(["hi", "--uppercase", "--align", "center"])
        assert ret == 0
        out = capsys.readouterr().out
        assert json.loads(out)["text"] == "HI"
        assert _attributes(out)["paragraph_style"]["value"]["alignment"] == "center"

    def test_preset_style(self, capsys):
        ret = main(["Title", "-p", "business", "-s", "heading_1"])
        assert ret == 0
        out = capsys.readouterr().out
        assert json.loads(out)["text"] == "TITLE"
        assert _attributes(out)["font"]["value"]["name"] == "Arial"

    def test_unknown_style(self, capsys):
        ret = main(["x", "--style", "nope"])
        assert ret == 1
        assert "unknown style" in capsys.readouterr().err

    def test_invalid_option_value(self, capsys):
        ret = main(["x", "--color", "mauve"])
        assert ret == 1
        err = capsys.readouterr().err
        assert err.startswith("Error:")
        assert "mauve" in err

    def test_invalid_preset(self):
        with pytest.raises(SystemExit):
            main(["x", "--preset", "nonexistent"])

    def test_verbose_flag(self, capsys):
        ret = main(["x", "--letter-spacing", "2", "-v"])
        assert ret == 0
        assert _attributes(capsys.readouterr().out)["kern"]["value"] == 2.0
