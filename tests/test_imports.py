"""Test that all modules can be imported without errors."""

import pytest


def test_tagged_import():
    from result_match import tagged

    assert hasattr(tagged, "result")
    assert hasattr(tagged, "Tag")


def test_classes_import():
    from result_match import classes

    assert hasattr(classes, "Result")
    assert hasattr(classes, "Success")
    assert hasattr(classes, "Failure")


def test_package_init_imports():
    """Test package __init__ exports all expected names."""
    import result_match

    for name in result_match.__all__:
        assert hasattr(result_match, name), name

    assert result_match.Success is result_match.tagged.Success
    assert result_match.result is result_match.tagged.result


def test_version():
    import result_match

    assert result_match.__version__ == "0.1.0"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
