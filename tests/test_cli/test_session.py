"""Tests for tourreg.cli.session — parsing, dispatch and command errors."""
from __future__ import annotations

import io
import json

import yaml

from tourreg.cli.session import Session
from tourreg.render import LineStyle


def _run(session: Session, *lines: str) -> list[str]:
    output: list[str] = []
    for line in lines:
        output.extend(str(rendered) for rendered in session.execute(line))
    return output


SCENARIO = (
    'create-operator "Adventure Tours" AKL',
    'create-activity "Bungee Jump" Adventure AT-AKL-001',
    'add-public-review AT-AKL-001-001 Alice n 4 "Great fun"',
    'add-private-review AT-AKL-001-001 Bob bob@example.com 2 "Too cold" y',
    'add-expert-review AT-AKL-001-001 "Dr Kea" 5 "Superb" y',
)


# ===========================================================================
# Parsing
# ===========================================================================


class TestParsing:
    def test_blank_and_comment_lines_print_nothing(
        self, session: Session, output: io.StringIO
    ) -> None:
        assert session.execute("") == []
        assert session.execute("   ") == []
        assert session.execute("# a comment") == []
        assert output.getvalue() == ""
        assert session.error_count == 0

    def test_quoted_arguments(self, session: Session) -> None:
        lines = _run(session, 'create-operator "Adventure Tours" AKL')
        assert lines == [
            "Successfully created operator 'Adventure Tours' ('AT-AKL-001') located in "
            "'Tāmaki Makaurau | Auckland'."
        ]

    def test_trailing_comment_ignored(self, session: Session) -> None:
        lines = _run(session, "search-operators * # everything")
        assert lines == ["There are no matching operators found."]

    def test_unbalanced_quote(self, session: Session) -> None:
        lines = session.execute('create-operator "Adventure Tours AKL')
        assert lines[0].style is LineStyle.ERROR
        assert str(lines[0]).startswith("Could not read command:")
        assert session.error_count == 1

    def test_command_name_case_insensitive(self, session: Session) -> None:
        assert _run(session, "SEARCH-OPERATORS *") == ["There are no matching operators found."]


# ===========================================================================
# Command errors
# ===========================================================================


class TestCommandErrors:
    def test_unknown_command(self, session: Session, output: io.StringIO) -> None:
        lines = session.execute("fly-away now")
        assert [str(line) for line in lines] == [
            "Command 'fly-away' not found. Run 'help' to see the list of available commands."
        ]
        assert lines[0].style is LineStyle.ERROR
        assert "fly-away" in output.getvalue()
        assert session.error_count == 1

    def test_wrong_argument_count(self, session: Session) -> None:
        assert _run(session, "view-activities") == [
            "Incorrect number of arguments for the 'view-activities' command: expected 1, got 0."
        ]
        assert _run(session, "create-operator OnlyName") == [
            "Incorrect number of arguments for the 'create-operator' command: expected 2, got 1."
        ]
        assert session.error_count == 2

    def test_registry_failures_are_not_command_errors(self, session: Session) -> None:
        assert _run(session, "view-activities NOPE") == [
            "Operator not found: 'NOPE' is an invalid operator ID."
        ]
        assert session.error_count == 0

    def test_review_option_count_checked_by_registry(self, session: Session) -> None:
        _run(session, *SCENARIO[:2])
        assert _run(session, "add-public-review AT-AKL-001-001 Alice n") == [
            "Review not added: a public review takes 4 options, but 2 were given."
        ]


# ===========================================================================
# Commands
# ===========================================================================


class TestCommands:
    def test_full_scenario(self, session: Session) -> None:
        created = _run(session, *SCENARIO)
        assert created[-3:] == [
            "Public review 'AT-AKL-001-001-R1' added successfully for activity 'Bungee Jump'.",
            "Private review 'AT-AKL-001-001-R2' added successfully for activity 'Bungee Jump'.",
            "Expert review 'AT-AKL-001-001-R3' added successfully for activity 'Bungee Jump'.",
        ]
        assert _run(session, "endorse-review AT-AKL-001-001-R1") == [
            "Review 'AT-AKL-001-001-R1' endorsed successfully."
        ]
        assert _run(session, 'resolve-review AT-AKL-001-001-R2 "Heaters added"') == [
            "Review 'AT-AKL-001-001-R2' resolved successfully with response 'Heaters added'."
        ]
        assert _run(session, "upload-review-image AT-AKL-001-001-R3 jump.png") == [
            "Image 'jump.png' uploaded successfully for review 'AT-AKL-001-001-R3'."
        ]
        reviews = _run(session, "display-reviews AT-AKL-001-001")
        assert reviews[0] == "There are 3 reviews for activity 'Bungee Jump'."
        assert "    Endorsed by admin." in reviews
        assert '    Resolved: "Heaters added"' in reviews
        assert "    Images: [jump.png]" in reviews
        top = _run(session, "display-top-activities")
        assert top[0] == (
            "Top reviewed activity in Tāmaki Makaurau | Auckland is 'Bungee Jump', "
            "with an average rating of 3.67"
        )
        assert session.error_count == 0

    def test_resolve_without_response(self, session: Session) -> None:
        _run(session, *SCENARIO)
        assert _run(session, "resolve-review AT-AKL-001-001-R2") == [
            "Review 'AT-AKL-001-001-R2' resolved successfully with response '-'."
        ]

    def test_search_without_keyword(self, session: Session) -> None:
        _run(session, *SCENARIO[:2])
        assert _run(session, "search-operators") == ["There are no matching operators found."]
        assert _run(session, "search-activities")[0] == "There is 1 matching activity found:"

    def test_help_lists_commands(self, session: Session) -> None:
        lines = _run(session, "help")
        assert lines[0] == "Available commands:"
        assert any(line.strip().startswith("create-operator NAME LOCATION") for line in lines)
        assert lines[-1].startswith("Locations: AKL")
        assert "Adventure" in lines[-2]

    def test_exit_finishes_session(self, session: Session) -> None:
        assert _run(session, "exit") == ["Bye!"]
        assert session.finished is True

    def test_export_yaml_by_default(self, session: Session) -> None:
        _run(session, *SCENARIO)
        (text,) = _run(session, "export")
        data = yaml.safe_load(text)
        assert data["operators"][0]["id"] == "AT-AKL-001"

    def test_export_json(self, session: Session) -> None:
        _run(session, *SCENARIO[:2])
        (text,) = _run(session, "export JSON")
        data = json.loads(text)
        assert data["operators"][0]["activities"][0]["id"] == "AT-AKL-001-001"

    def test_export_unknown_format_is_a_command_error(self, session: Session) -> None:
        lines = session.execute("export xml")
        assert [str(line) for line in lines] == [
            "Unknown export format 'xml'. Choose one of: json, yaml."
        ]
        assert lines[0].style is LineStyle.ERROR
        assert session.error_count == 1

    def test_output_is_printed(self, session: Session, output: io.StringIO) -> None:
        _run(session, 'create-operator "Adventure Tours" AKL')
        assert output.getvalue().endswith("'Tāmaki Makaurau | Auckland'.\n")
