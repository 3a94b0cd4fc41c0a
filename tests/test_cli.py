"""
Tests for the edmwire command-line interface.
"""

import json

import pytest

from edmwire.cli import EXIT_ERROR, EXIT_INVALID_TYPE, EXIT_OK, main


class TestEncode:
    """Test the encode command."""

    def test_query_literal(self, capsys):
        """--query emits a filter literal."""
        assert main(["encode", "Edm.Int64", "5", "--query"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "5L"

    def test_body_text(self, capsys):
        """Body text is the default."""
        assert main(["encode", "Edm.Boolean", "true"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "1"

    def test_string_escaping(self, capsys):
        """Strings are escaped for the body."""
        assert main(["encode", "Edm.String", "a<b"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "a&lt;b"

    def test_binary_query(self, capsys):
        """Binary input is base64 and comes out as hex."""
        assert main(["encode", "Edm.Binary", "3q0=", "--query"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "X'dead'"

    def test_binary_body(self, capsys):
        """Binary body text keeps the base64 input."""
        assert main(["encode", "Edm.Binary", "3q0="]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "3q0="

    def test_empty_type_is_string(self, capsys):
        """An empty type encodes as a string."""
        assert main(["encode", "", "O'Brien", "--query"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "'O''Brien'"


class TestDecode:
    """Test the decode command."""

    def test_text_output(self, capsys):
        """Text output is the value repr."""
        assert main(["decode", "Edm.Int32", "42"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "42"

    def test_json_output(self, capsys):
        """JSON output encodes datetimes as ISO text."""
        code = main(["--format", "json", "decode", "Edm.DateTime", "2012-03-04T05:06:07Z"])
        assert code == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data == {"type": "Edm.DateTime", "value": "2012-03-04T05:06:07+00:00"}

    def test_bad_datetime(self, capsys):
        """Unparsable values exit with 2."""
        assert main(["decode", "Edm.DateTime", "soon"]) == EXIT_ERROR
        assert "Error" in capsys.readouterr().err


class TestCheck:
    """Test the check command."""

    def test_valid(self, capsys):
        """Valid tags are echoed."""
        assert main(["check", "Edm.Guid"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "Edm.Guid"

    def test_default(self, capsys):
        """No tag resolves to Edm.String."""
        assert main(["check"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "Edm.String"

    def test_invalid(self, capsys):
        """Invalid tags exit with 1."""
        assert main(["check", "Edm.Unknown"]) == EXIT_INVALID_TYPE
        assert "invalid" in capsys.readouterr().err

    def test_version(self, capsys):
        """--version exits cleanly."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
