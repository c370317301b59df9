"""Tests for the argparse-backed option parser (infra/option_parser.py).

Verifies that:
* Both ``--name=value`` and ``--name value`` forms parse.
* Values are converted to their declared types.
* Only supplied options appear in the option map.
* Positional tokens keep their order, even when intermixed with options.
* Every malformed input surfaces as ``OptionParseError`` — never SystemExit.
"""

from __future__ import annotations

import pytest

from rgw_admin.core.options import OptionEntry, OptionType, build_option_table
from rgw_admin.exceptions import OptionParseError
from rgw_admin.infra.option_parser import ArgparseOptionParser


@pytest.fixture
def parser() -> ArgparseOptionParser:
    return ArgparseOptionParser()


class TestParseSuccess:
    def test_equals_form(self, parser: ArgparseOptionParser) -> None:
        inv = parser.parse(["user", "info", "--uid=7"])
        assert inv.tokens == ("user", "info")
        assert dict(inv.options) == {"uid": 7}

    def test_separate_value_form(self, parser: ArgparseOptionParser) -> None:
        inv = parser.parse(["user", "create", "--uid", "200", "--display-name", "foo", "--email", "foo@gmail.com"])
        assert dict(inv.options) == {"uid": 200, "display-name": "foo", "email": "foo@gmail.com"}

    def test_uid_is_int(self, parser: ArgparseOptionParser) -> None:
        inv = parser.parse(["--uid=42"])
        assert isinstance(inv.get("uid"), int)

    def test_absent_options_not_in_map(self, parser: ArgparseOptionParser) -> None:
        inv = parser.parse(["user", "info"])
        assert dict(inv.options) == {}
        assert inv.get("uid") is None

    def test_help_flag(self, parser: ArgparseOptionParser) -> None:
        inv = parser.parse(["user", "--help"])
        assert inv.get("help") is True
        assert inv.tokens == ("user",)

    def test_intermixed_tokens_keep_order(self, parser: ArgparseOptionParser) -> None:
        inv = parser.parse(["user", "--uid=1", "delete", "trailing"])
        assert inv.tokens == ("user", "delete", "trailing")
        assert inv.get("uid") == 1

    def test_empty_argv(self, parser: ArgparseOptionParser) -> None:
        inv = parser.parse([])
        assert inv.tokens == ()
        assert dict(inv.options) == {}

    def test_value_with_spaces(self, parser: ArgparseOptionParser) -> None:
        inv = parser.parse(["--display-name", "Jane Doe"])
        assert inv.get("display-name") == "Jane Doe"

    def test_custom_table(self) -> None:
        table = build_option_table(
            (
                OptionEntry("verbose", OptionType.FLAG, is_global=True),
                OptionEntry("max-objects", OptionType.INTEGER),
            )
        )
        inv = ArgparseOptionParser(table).parse(["bucket", "--max-objects", "10", "--verbose"])
        assert dict(inv.options) == {"max-objects": 10, "verbose": True}


class TestParseFailure:
    @pytest.mark.parametrize(
        "argv",
        [
            ["user", "info", "--uid=abc"],
            ["user", "info", "--uid"],
            ["user", "info", "--unknown=1"],
            ["user", "info", "--ui=7"],
            ["user", "info", "-x"],
            ["--uid=1", "--uid=2"],
            ["--help", "--help"],
            ["--help=yes"],
        ],
    )
    def test_raises_option_parse_error(
        self, parser: ArgparseOptionParser, argv: list[str],
    ) -> None:
        with pytest.raises(OptionParseError):
            parser.parse(argv)

    def test_error_mentions_option(self, parser: ArgparseOptionParser) -> None:
        with pytest.raises(OptionParseError, match="--uid"):
            parser.parse(["--uid=abc"])

    def test_parser_is_reusable_after_error(self, parser: ArgparseOptionParser) -> None:
        with pytest.raises(OptionParseError):
            parser.parse(["--uid=abc"])
        assert parser.parse(["--uid=5"]).get("uid") == 5
