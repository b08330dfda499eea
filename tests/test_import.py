"""Verify package imports work correctly."""


def test_import_chatmarkup() -> None:
    """Test that chatmarkup can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import chatmarkup

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert chatmarkup.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from chatmarkup import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exports() -> None:
    """Every name in __all__ resolves."""
    import chatmarkup

    for name in chatmarkup.__all__:
        assert hasattr(chatmarkup, name), name
