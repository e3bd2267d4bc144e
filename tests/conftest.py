"""Shared test fixtures for all test modules."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """
    Keep tests away from the user's home directory and environment.

    HOME points at a temporary directory so the default config path
    (~/.config/huntmark/config.yaml) and log directory never touch real
    files, and HUNTMARK_* overrides from the developer's shell are removed.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in (
        "HUNTMARK_LOG_LEVEL",
        "HUNTMARK_TYPEWRITER_DELAY",
        "HUNTMARK_TYPEWRITER_CURSOR",
        "HUNTMARK_TYPEWRITER_SKIP",
    ):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture(autouse=True)
def quiet_structlog():
    """
    Discard log output during tests.

    Loggers are not cached, so structlog.testing.capture_logs still sees
    every event.
    """
    structlog.configure(logger_factory=structlog.ReturnLoggerFactory())
    yield
    structlog.reset_defaults()


@pytest.fixture
def riddle_text():
    """A riddle using every markup construct."""
    return (
        "You stand at the **old gate**.\n"
        "Look *closely* at the {{color:red}}red door{{/color}}.\n\n"
        "{{handwritten:scrawl}}Meet me at **noon**{{/handwritten}}\n"
        "{{image:/puzzle-images/gate.jpg}}"
    )
