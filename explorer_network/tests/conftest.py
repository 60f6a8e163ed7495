"""Pytest configuration for the network test suite."""

from __future__ import annotations

import pytest

from explorer_network.tests.utils import Recorder


@pytest.fixture()
def recorder() -> Recorder:
    return Recorder()
