"""Global pytest configuration."""

from __future__ import annotations

from dataclasses import replace

import pytest

from heapgraph import config


@pytest.fixture
def graph_config():
    """Yield the global GraphConfig and restore its defaults afterwards."""
    saved = replace(config.GRAPH_CONFIG)
    yield config.GRAPH_CONFIG
    config.GRAPH_CONFIG.default_edge_weight = saved.default_edge_weight
    config.GRAPH_CONFIG.duplicate_edge_policy = saved.duplicate_edge_policy
