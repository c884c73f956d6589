"""Tests for :mod:`arenagraph.graph.ids`."""

from __future__ import annotations

import pytest

from arenagraph.graph import ids


def test_node_and_edge_indices_are_distinct_types():
    assert ids.NodeIndex(0) == ids.NodeIndex(0)
    assert ids.NodeIndex(0) != ids.EdgeIndex(0)
    assert {ids.NodeIndex(1), ids.NodeIndex(1)} == {ids.NodeIndex(1)}


def test_indices_expose_their_integer_value():
    ind = ids.EdgeIndex(4)
    assert int(ind) == 4
    assert ind.value == 4
    assert repr(ind) == "EdgeIndex(4)"


def test_indices_reject_invalid_values():
    with pytest.raises(ValueError):
        ids.NodeIndex(-1)
    with pytest.raises(TypeError):
        ids.NodeIndex("1")
    with pytest.raises(TypeError):
        ids.EdgeIndex(True)


def test_utc_now_returns_iso_format():
    timestamp = ids.utc_now()
    assert "T" in timestamp and timestamp.endswith("+00:00")
