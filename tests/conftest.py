"""Shared test fixtures for flamefold tests."""

import os

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
def reference_lines():
    """Sorted collapsed stacks with nested, repeated and sibling paths."""
    return [
        "a 1",
        "a;b 1",
        "a;b 1",
        "a;b;c 1",
        "a;b;c;d 1",
        "a;b;e 3",
        "f;g 1",
    ]


@pytest.fixture
def reference_json():
    """Expected serialization of ``reference_lines``."""
    return (
        '{"name":"","value":9,"children":[{"name":"a","value":8,"children":'
        '[{"name":"b","value":7,"children":[{"name":"c","value":2,"children":'
        '[{"name":"d","value":1,"children":[]}]},{"name":"e","value":3,"children":[]}]}]},'
        '{"name":"f","value":1,"children":[{"name":"g","value":1,"children":[]}]}]}'
    )


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with no global/project config files and no FLAMEFOLD_* variables."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.chdir(work)
    for key in [k for k in os.environ if k.startswith("FLAMEFOLD_")]:
        monkeypatch.delenv(key)
    return work
