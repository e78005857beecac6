"""
Testing the key-value stores.
"""

import pytest

from jotto.exceptions import StorageError
from jotto.services.storage import InMemoryStore, JsonFileStore, KeyValueStore


def test_in_memory_store():
    store = InMemoryStore({'a': '1'})
    assert store.get('a') == '1'
    assert store.get('missing') is None
    store.set('b', '2')
    assert store.get('b') == '2'


def test_json_file_store_missing_file_reads_empty(tmp_path):
    store = JsonFileStore(tmp_path / 'store.json')
    assert store.get('jottoHighScores') is None


def test_json_file_store_persists_across_instances(tmp_path):
    path = tmp_path / 'nested' / 'store.json'
    JsonFileStore(path).set('jottoHasVisited', 'true')
    assert JsonFileStore(path).get('jottoHasVisited') == 'true'


def test_json_file_store_keeps_other_keys(tmp_path):
    store = JsonFileStore(tmp_path / 'store.json')
    store.set('one', '1')
    store.set('two', '2')
    assert store.get('one') == '1'
    assert store.get('two') == '2'


def test_json_file_store_corrupt_file(tmp_path):
    path = tmp_path / 'store.json'
    path.write_text('not json', encoding='utf-8')
    store = JsonFileStore(path)

    with pytest.raises(StorageError):
        store.get('one')

    store.set('one', '1')
    assert store.get('one') == '1'


def test_incomplete_store_cannot_be_created():
    class ReadOnlyStore(KeyValueStore):
        def get(self, key):
            return None

    with pytest.raises(TypeError):
        ReadOnlyStore()
