"""Test module for xml_format_builder package initialization."""


def test_package_import() -> None:
    """Test that the package can be imported successfully."""
    # Arrange & Act
    import xml_format_builder

    # Assert
    assert xml_format_builder is not None


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    # Arrange & Act
    import xml_format_builder

    # Assert
    assert isinstance(xml_format_builder.__version__, str)
    assert xml_format_builder.__version__ == "0.1.0"


def test_package_exports() -> None:
    """Test that the public API is exported at package level."""
    # Arrange & Act
    import xml_format_builder

    # Assert
    for name in ("XMLBuilder", "FormattingOptions", "BuilderConfig", "DTDAttlistDecl"):
        assert name in xml_format_builder.__all__
        assert hasattr(xml_format_builder, name)
