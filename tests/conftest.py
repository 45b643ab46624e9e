"""Shared test fixtures for DrillDown tests."""

import pytest


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def authors():
    """A slice of CPAN author ids: 16 under AA, 12 under AB, 5 under Z."""
    return [
        "AADLER", "AAKD", "AAKHTER", "AALLAN", "AANKHEN", "AANZLOVAR", "AAR",
        "AARDEN", "AARDO", "AARE", "AARON", "AARONJJ", "AARONSCA", "AASSAD",
        "AAU", "AAYARS", "ABALAMA", "ABARCLAY", "ABCDEFGH", "ABE", "ABELEW",
        "ABELTJE", "ABERGMAN", "ABERNDT", "ABEROHAM", "ABH", "ABHAS",
        "ABHIDHAR", "ZTURK", "ZUMMO", "ZUQIF", "ZURAWSKI", "ZZCGUMK",
    ]  # fmt: skip


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with an empty home and cwd and no DRILLDOWN_* variables set."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.chdir(work)
    for var in ("DRILLDOWN_MAX_ITEMS", "DRILLDOWN_MAX_DEPTH", "DRILLDOWN_SLICER"):
        monkeypatch.delenv(var, raising=False)
    return {"home": home, "work": work}
