import json

from storage.best_score import JsonBestScoreStore, MemoryBestScoreStore


def test_missing_file_means_no_record(tmp_path):
    store = JsonBestScoreStore(str(tmp_path / "scores.json"))
    assert store.get_best_score() is None


def test_value_survives_a_new_store(tmp_path):
    path = str(tmp_path / "nested" / "scores.json")
    JsonBestScoreStore(path).set_best_score(65432)
    assert JsonBestScoreStore(path).get_best_score() == 65432
    with open(path, encoding="utf-8") as fh:
        assert json.load(fh) == {"bestScore": 65432}


def test_other_keys_are_preserved(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"player": "ana", "bestScore": 5}), encoding="utf-8")
    JsonBestScoreStore(str(path)).set_best_score(9)
    assert json.loads(path.read_text(encoding="utf-8")) == {"player": "ana", "bestScore": 9}


def test_corrupt_file_is_treated_as_missing(tmp_path, caplog):
    path = tmp_path / "scores.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonBestScoreStore(str(path))
    assert store.get_best_score() is None
    assert "unreadable" in caplog.text
    store.set_best_score(12)
    assert store.get_best_score() == 12


def test_non_integer_value_is_ignored(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"bestScore": "fast"}), encoding="utf-8")
    assert JsonBestScoreStore(str(path)).get_best_score() is None


def test_string_number_is_accepted(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"bestScore": "1200"}), encoding="utf-8")
    assert JsonBestScoreStore(str(path)).get_best_score() == 1200


def test_memory_store_counts_writes():
    store = MemoryBestScoreStore()
    assert store.get_best_score() is None
    store.set_best_score(3)
    assert (store.value, store.writes) == (3, 1)
