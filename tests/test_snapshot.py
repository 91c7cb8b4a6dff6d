import json
import os

import pytest

from skyboard.snapshot import SnapshotStore

from conftest import SAMPLE_STATES


def test_read_before_write(snapshot_path):
    store = SnapshotStore(str(snapshot_path))

    assert store.read() is None
    assert store.read_text() is None
    assert not store.exists()


def test_write_then_read(snapshot_path):
    store = SnapshotStore(str(snapshot_path))

    store.write(SAMPLE_STATES[:10])

    assert store.read() == SAMPLE_STATES[:10]
    assert json.loads(snapshot_path.read_text()) == SAMPLE_STATES[:10]


def test_overwrite_leaves_no_temp_files(snapshot_path):
    store = SnapshotStore(str(snapshot_path))

    store.write(SAMPLE_STATES[:3])
    store.write(SAMPLE_STATES[3:5])

    assert store.read() == SAMPLE_STATES[3:5]
    assert os.listdir(snapshot_path.parent) == ['flights_temp.json']


def test_failed_write_keeps_previous_snapshot(snapshot_path):
    store = SnapshotStore(str(snapshot_path))
    store.write(SAMPLE_STATES[:2])

    with pytest.raises(TypeError):
        store.write([object()])

    assert store.read() == SAMPLE_STATES[:2]
    assert os.listdir(snapshot_path.parent) == ['flights_temp.json']


def test_creates_parent_directory(tmp_path):
    store = SnapshotStore(str(tmp_path / 'cache' / 'flights_temp.json'))

    store.write([])

    assert store.read() == []
