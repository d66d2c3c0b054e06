"""Test module for indent_tree package initialization."""


def test_package_import() -> None:
    """Test that the package can be imported successfully."""
    # Arrange & Act
    import indent_tree

    # Assert
    assert indent_tree is not None


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    # Arrange & Act
    import indent_tree

    # Assert
    assert isinstance(indent_tree.__version__, str)
    assert indent_tree.__version__ == "0.1.0"


def test_package_has_author() -> None:
    """Test that the package has an author attribute."""
    # Arrange & Act
    import indent_tree

    # Assert
    assert indent_tree.__author__ == "Indent Tree Team"


def test_package_all_exports_resolve() -> None:
    """Test that every name in __all__ is importable from the package."""
    # Arrange & Act
    import indent_tree

    # Assert
    for name in indent_tree.__all__:
        assert hasattr(indent_tree, name), name
