"""
Pytest config.

Makes the repo root importable, and keeps real stack config out of the tests.
"""
import sys
from pathlib import Path

import pytest

repo_root = str(Path(__file__).resolve().parents[1])
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)


class FakeConfig:
    """
    Stands in for pulumi.Config, backed by a plain dict of "ns:key" -> value.
    """
    values = {}

    def __init__(self, name):
        self.name = name

    def get(self, key):
        return self.values.get(f"{self.name}:{key}")


@pytest.fixture
def stack_config(monkeypatch):
    import pulumi

    values = {}
    monkeypatch.setattr(FakeConfig, 'values', values)
    monkeypatch.setattr(pulumi, 'Config', FakeConfig)
    for var in ('AWS_REGION', 'AWS_DEFAULT_REGION', 'AWS_PARTITION'):
        monkeypatch.delenv(var, raising=False)
    return values
