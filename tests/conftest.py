import tempfile
from pathlib import Path

import pytest


def pytest_configure():
    """Add the src directory to the Python path before any tests run."""
    import sys
    from pathlib import Path

    # Add src directory to Python path
    src_dir = Path(__file__).parent.parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def clean_argsift_env(monkeypatch):
    """Keep ARGSIFT_* variables from the developer's shell out of the tests."""
    monkeypatch.delenv("ARGSIFT_DEBUG", raising=False)
    monkeypatch.delenv("ARGSIFT_MODE", raising=False)


@pytest.fixture
def temp_config_file():
    """Fixture for temporary config files."""
    temp_dir = tempfile.mkdtemp()
    config_path = Path(temp_dir) / "argsift.conf"
    yield config_path
    # Cleanup after test
    import shutil

    shutil.rmtree(temp_dir)


@pytest.fixture
def temp_config_with_content(tmp_path):
    """Fixture for temporary config files with various content types."""

    def _create_config(content):
        config_path = tmp_path / "argsift.conf"
        with open(config_path, "w") as f:
            f.write(content)
        return config_path

    yield _create_config


@pytest.fixture
def mock_config_file(mocker, temp_config_file):
    """Fixture that creates a config file and mocks find_config_file to return it."""

    def _setup_config(content):
        with open(temp_config_file, "w") as f:
            f.write(content)
        return mocker.patch(
            "argsift.config_manager.ConfigManager.find_config_file",
            return_value=temp_config_file,
        )

    return _setup_config


@pytest.fixture
def no_config_file(mocker):
    """Fixture that makes the application run without an argsift.conf."""
    return mocker.patch(
        "argsift.config_manager.ConfigManager.find_config_file", return_value=None
    )
