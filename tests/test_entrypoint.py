"""Test for __main__.py module."""

from unittest.mock import patch


def test_main_module():
    """Test that __main__.py can be imported and calls cli."""
    with patch('too_long.cli.main.cli') as mock_cli:
        import too_long.__main__
        # CLI should not be called on import
        mock_cli.assert_not_called()


def test_package_exports_cli():
    """Test that the package exposes the CLI entry point."""
    import too_long
    from too_long.cli.main import cli

    assert too_long.cli is cli
    assert too_long.__version__
