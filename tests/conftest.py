import logging

import pytest


@pytest.fixture(autouse=True)
def reset_diagnostics_logger():
    """Drop handlers bound to a previous test's captured streams."""
    yield
    diagnostics = logging.getLogger("growth_calc")
    for handler in list(diagnostics.handlers):
        diagnostics.removeHandler(handler)
        handler.close()


@pytest.fixture
def no_sleep(monkeypatch):
    """Record requested delays instead of sleeping."""
    delays = []
    monkeypatch.setattr("growth_calc.growth.runner.time.sleep", delays.append)
    return delays
