"""Verify package imports work correctly."""


def test_import_sapling() -> None:
    """Test that sapling can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import sapling

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert sapling.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from sapling import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    """Everything in __all__ is importable from the top-level package."""
    import sapling

    for name in sapling.__all__:
        assert hasattr(sapling, name), name
