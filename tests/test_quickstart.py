"""Test that the quickstart API works for tourreg."""
from __future__ import annotations


def test_quickstart_import() -> None:
    import tourreg

    assert callable(tourreg.run_script)
    assert callable(tourreg.render_outcome)


def test_quickstart_version(expected_version: str) -> None:
    import tourreg

    assert tourreg.__version__ == expected_version


def test_quickstart_registry() -> None:
    from tourreg import OperatorRegistry

    registry = OperatorRegistry()
    registry.create_operator("Adventure Tours", "AKL")
    assert len(registry) == 1


def test_quickstart_render_outcome() -> None:
    import tourreg

    registry = tourreg.OperatorRegistry()
    lines = tourreg.render_outcome(registry.create_operator("Adventure Tours", "AKL"))
    assert str(lines[0]).startswith("Successfully created operator")


def test_quickstart_render_outcome_after_front_end_loaded() -> None:
    import tourreg
    import tourreg.cli.session  # noqa: F401
    import tourreg.render.renderer  # noqa: F401

    tourreg.run_script("search-operators *")
    assert callable(tourreg.render_outcome)
    lines = tourreg.render_outcome(tourreg.OperatorRegistry().search_operators("*"))
    assert [str(line) for line in lines] == ["There are no matching operators found."]


def test_quickstart_run_script() -> None:
    import tourreg

    lines = tourreg.run_script(
        """
        create-operator "Adventure Tours" AKL
        create-activity "Bungee Jump" Adventure AT-AKL-001
        add-public-review AT-AKL-001-001 Alice n 6 "Loved it"
        display-top-activities
        """
    )
    assert lines[2] == (
        "Public review 'AT-AKL-001-001-R1' added successfully for activity 'Bungee Jump'."
    )
    assert lines[3].endswith("is 'Bungee Jump', with an average rating of 5.00")


def test_quickstart_run_script_shares_registry() -> None:
    import tourreg

    registry = tourreg.OperatorRegistry()
    tourreg.run_script('create-operator "Adventure Tours" AKL', registry=registry)
    assert registry.find_operator("at-akl-001") is not None


def test_quickstart_run_script_stops_at_exit() -> None:
    import tourreg

    assert tourreg.run_script("exit\nsearch-operators *") == ["Bye!"]


def test_quickstart_all_exports() -> None:
    import tourreg

    for name in tourreg.__all__:
        assert hasattr(tourreg, name)
