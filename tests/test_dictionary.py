import logging
import threading

from wordtrie.dictionary import Dictionary


def test_starts_empty():
    d = Dictionary()
    assert len(d) == 0
    assert d.search("a") == []


def test_loads_word_lists_in_order(tmp_path, caplog):
    first = tmp_path / "first.txt"
    first.write_text("cat car\ncart\n\n", encoding="utf-8")
    second = tmp_path / "second.txt"
    second.write_text("dog cat\n", encoding="utf-8")

    with caplog.at_level(logging.INFO, logger="wordtrie"):
        d = Dictionary([str(first), str(second)])

    assert list(d) == ["cat", "car", "cart", "dog"]
    assert len(d) == 4
    assert "Loaded 3 words" in caplog.text
    assert "Loaded 1 words" in caplog.text


def test_missing_file_is_skipped(tmp_path, caplog):
    good = tmp_path / "words.txt"
    good.write_text("żółw\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="wordtrie"):
        d = Dictionary([str(tmp_path / "nope.txt"), str(good)])

    assert "not found" in caplog.text
    assert d.search("ż") == ["żółw"]


def test_undecodable_file_is_skipped(tmp_path, caplog):
    bad = tmp_path / "bad.txt"
    bad.write_bytes(b"\xff\xfe\xfa")

    with caplog.at_level(logging.WARNING, logger="wordtrie"):
        d = Dictionary([str(bad)])

    assert "Could not read" in caplog.text
    assert len(d) == 0


def test_insert_search_and_contains():
    d = Dictionary()
    d.insert("hello")
    assert "hello" in d
    assert "hell" not in d
    assert d.search("he") == ["hello"]


def test_add_words_counts_new_only():
    d = Dictionary()
    assert d.add_words(["a", "b", "a"]) == 2
    assert d.add_words(["b", "c"]) == 1
    assert len(d) == 3


def test_concurrent_inserts():
    d = Dictionary()

    def worker(n):
        for i in range(200):
            d.insert(f"w{n}-{i}")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(d) == 800
    assert len(d.search("w")) == 800


def test_file_failing_midway_adds_nothing(tmp_path, caplog):
    bad = tmp_path / "partial.txt"
    bad.write_bytes(b"good\n" * 2000 + b"\xff\n")

    with caplog.at_level(logging.WARNING, logger="wordtrie"):
        d = Dictionary([str(bad)])

    assert "Could not read" in caplog.text
    assert len(d) == 0
    assert d.search("g") == []


def test_single_path_argument(tmp_path, monkeypatch, caplog):
    (tmp_path / "w.txt").write_text("dog\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    with caplog.at_level(logging.WARNING, logger="wordtrie"):
        d = Dictionary("w.txt")

    assert d.search("d") == ["dog"]
    assert caplog.text == ""


def test_single_pathlike_argument(tmp_path):
    words = tmp_path / "w.txt"
    words.write_text("cat car\n", encoding="utf-8")

    assert list(Dictionary(words)) == ["cat", "car"]
