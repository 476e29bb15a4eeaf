"""Simple test to verify pytest works."""


def test_import_newsletter():
    """Test that we can import newsletter modules."""
    try:
        from newsletter import cli, script_runner
        from newsletter.core import subject

        assert True
    except ImportError as e:
        raise AssertionError(f"Import failed: {e}") from None
