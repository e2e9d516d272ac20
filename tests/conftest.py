"""
Global test configuration with support for different test types.
"""

import logging
import os

import pytest

from tests.helpers import (
    FakeChatClient,
    FakePresentationHost,
    FakeSpreadsheetHost,
    FakeTextHost,
)


# --- Environment Isolation (Autouse) ---
@pytest.fixture(autouse=True)
def isolate_gemini_office_env(request, monkeypatch):
    """Ensure a clean GEMINI_OFFICE_* environment for each test.

    - Removes all GEMINI_OFFICE_* variables and debug toggles before each test
    - Leaves other variables intact for stability

    Escape hatch: @pytest.mark.allow_env_pollution keeps the current env.
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("GEMINI_OFFICE_"):
            monkeypatch.delenv(key, raising=False)
    # Avoid DEBUG toggles affecting telemetry paths
    monkeypatch.delenv("DEBUG", raising=False)


@pytest.fixture(autouse=True)
def neutral_home_config(request, monkeypatch, tmp_path, isolate_gemini_office_env):  # noqa: ARG001
    """Point the home-config path to an isolated temp file by default.

    Prevents reading a developer's real ~/.config/gemini_office.toml.
    """
    if request.node.get_closest_marker("allow_real_home_config"):
        return

    fake_home_dir = tmp_path / "home_config_isolated"
    fake_home_dir.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv(
        "GEMINI_OFFICE_CONFIG_HOME", str(fake_home_dir / "gemini_office.toml")
    )


# --- Logging Fixtures ---
@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Sets the log level for noisy external libraries to WARNING."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("google_genai").setLevel(logging.WARNING)


# --- Test Environment Markers ---
def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "contract: Protocol and invariant conformance tests",
        "integration: File-backed end-to-end tests with real documents",
        "security: Secret handling tests",
        "allow_env_pollution: Keep GEMINI_OFFICE_* variables from the outer env",
        "allow_real_home_config: Read the real home configuration file",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)


# --- Core Fixtures ---


@pytest.fixture
def text_host():
    return FakeTextHost()


@pytest.fixture
def sheet_host():
    return FakeSpreadsheetHost(selection="B2:D6")


@pytest.fixture
def deck_host():
    return FakePresentationHost()


@pytest.fixture
def chat_client():
    return FakeChatClient("Sure, here is your data:\nName,Age\nJohn,25")
