from pathlib import Path

TEST_DATA_ROOT = Path(__file__).parent


def get_path(filename: str) -> Path:
    """Get absolute path to a test data file"""
    return TEST_DATA_ROOT / filename
