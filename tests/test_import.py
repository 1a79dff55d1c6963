"""Verify package imports work correctly."""


def test_import_sourcecheck() -> None:
    """Test that sourcecheck can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import sourcecheck

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert sourcecheck.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from sourcecheck import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api() -> None:
    import sourcecheck

    for name in sourcecheck.__all__:
        assert hasattr(sourcecheck, name), name


def test_main_module_importable() -> None:
    import importlib.util

    assert importlib.util.find_spec("sourcecheck.__main__") is not None
