"""
Testing score calculation and the high-score table.
"""

import json

from jotto.models.score import HighScoreEntry
from jotto.services.game_service import GameSession
from jotto.services.score_ledger import ScoreLedger, compute_score, record

from conftest import FailingStore


def _entry(score, word='mouse', attempts=1, timestamp='2026-01-01T00:00:00+00:00'):
    return HighScoreEntry(score=score, word=word, attempts=attempts, timestamp=timestamp)


def test_compute_score():
    assert compute_score(0) == 1000
    assert compute_score(1) == 950
    assert compute_score(9) == 550
    assert compute_score(18) == 100
    assert compute_score(40) == 100


def test_compute_score_never_increases():
    scores = [compute_score(n) for n in range(30)]
    assert scores == sorted(scores, reverse=True)


def test_record_sorts_descending():
    table = record([_entry(500), _entry(900)], _entry(700))
    assert [e.score for e in table] == [900, 700, 500]


def test_record_keeps_top_ten():
    table = ()
    for score in range(100, 1300, 100):
        table = record(table, _entry(score))
    assert len(table) == 10
    assert table[0].score == 1200
    assert table[-1].score == 300


def test_record_ties_keep_insertion_order():
    older = _entry(800, word='beach')
    newer = _entry(800, word='chair')
    table = record([older], newer)
    assert [e.word for e in table] == ['beach', 'chair']


def test_record_does_not_mutate_input():
    original = (_entry(500),)
    record(original, _entry(900))
    assert original == (_entry(500),)


def test_load_empty_store(ledger):
    assert ledger.load() == ()


def test_save_then_load(ledger, store):
    table = (_entry(950, attempts=2), _entry(600, word='train', attempts=9))
    assert ledger.save(table) is True
    assert ledger.load() == table

    stored = json.loads(store.get('jottoHighScores'))
    assert stored[0] == {
        'score': 950, 'word': 'mouse', 'attempts': 2,
        'date': '2026-01-01T00:00:00+00:00'
    }


def test_load_discards_malformed_table(ledger, store):
    store.set('jottoHighScores', '{not json')
    assert ledger.load() == ()

    store.set('jottoHighScores', json.dumps([{'score': 10}]))
    assert ledger.load() == ()

    store.set('jottoHighScores', '[{"score": Infinity, "word": "mouse", "attempts": 1, "date": "x"}]')
    assert ledger.load() == ()


def test_load_accepts_timestamp_field(ledger, store):
    store.set('jottoHighScores', json.dumps([
        {'score': 700, 'word': 'lemon', 'attempts': 7, 'timestamp': '2026-02-02T10:00:00'}
    ]))
    (entry,) = ledger.load()
    assert entry.timestamp == '2026-02-02T10:00:00'


def test_failing_store_degrades_gracefully():
    ledger = ScoreLedger(FailingStore())
    assert ledger.load() == ()
    assert ledger.save((_entry(900),)) is False

    table = ledger.add((), _entry(900))
    assert [e.score for e in table] == [900]


def test_first_visit_flag(ledger, store):
    assert ledger.has_visited() is False
    assert ledger.first_visit() is True
    assert store.get('jottoHasVisited') == 'true'
    assert ledger.first_visit() is False


def test_visit_flag_with_failing_store():
    ledger = ScoreLedger(FailingStore())
    assert ledger.has_visited() is False
    ledger.mark_visited()


def test_infinite_stored_score_does_not_block_play(store):
    store.set('jottoHighScores', '[{"score": Infinity, "word": "mouse", "attempts": 1, "date": "x"}]')
    game = GameSession(['mouse'], ScoreLedger(store))
    assert game.high_scores == ()
    assert game.submit_guess('mouse').score == 1000
