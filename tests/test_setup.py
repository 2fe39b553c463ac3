import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def test_project_structure():
    """Test that the project structure is correctly set up."""
    expected_dirs = [
        "src/key_check",
        "tests",
    ]

    for dir_path in expected_dirs:
        assert (PROJECT_ROOT / dir_path).exists(), f"Directory {dir_path} does not exist"


def test_dependencies():
    """Test that key dependencies can be imported."""
    try:
        import dotenv
    except ImportError as e:
        assert False, f"Failed to import dependency: {e}"


def test_environment_template():
    """Test that .env.example exists."""
    assert os.path.exists(PROJECT_ROOT / ".env.example"), ".env.example file not found"
