import json

from wordle_entropy.opening import OpeningCache, best_opening, cache_key, rank_openings
from wordle_entropy.selection import ScoredGuess, rank_guesses
from wordle_entropy.words import WordList


def test_computes_and_caches(tmp_path, small_words):
    cache = tmp_path / "openings.json"
    lines = []
    ranking = rank_openings(small_words, cache, log=lines.append)
    assert ranking == rank_guesses(small_words.words, small_words.words)
    assert cache.exists()
    assert lines[-1] == f"opening: wrote {cache}"

    lines.clear()
    assert rank_openings(small_words, cache, log=lines.append) == ranking
    assert lines == [f"opening: cache hit in {cache}"]


def test_best_opening_is_top_of_ranking(tmp_path, small_words):
    assert best_opening(small_words, tmp_path / "c.json") == rank_guesses(small_words.words, small_words.words)[0]


def test_key_depends_on_word_list(small_words):
    other = WordList.from_words(list(small_words.words)[:-1])
    assert cache_key(small_words) != cache_key(other)


def test_one_file_holds_several_lists(tmp_path, small_words):
    other = WordList.from_words(["house", "mouse", "crane"])
    cache = OpeningCache(tmp_path / "openings.json")
    assert cache.put(small_words, rank_guesses(small_words.words, small_words.words))
    assert cache.put(other, rank_guesses(other.words, other.words))
    assert len(cache.get(small_words)) == len(small_words)
    assert [s.guess for s in cache.get(other)] == [s.guess for s in rank_guesses(other.words, other.words)]


def test_corrupt_cache_is_a_miss(tmp_path, small_words):
    path = tmp_path / "openings.json"
    path.write_text("{not json", encoding="utf-8")
    assert OpeningCache(path).get(small_words) is None
    ranking = rank_openings(small_words, path)
    assert ranking[0].guess in small_words
    assert cache_key(small_words) in json.loads(path.read_text(encoding="utf-8"))


def test_malformed_entries_ignored(tmp_path, small_words):
    path = tmp_path / "openings.json"
    key = cache_key(small_words)
    path.write_text(json.dumps({key: {"ranking": [["slate", "x"], [1, 2]]}}), encoding="utf-8")
    assert OpeningCache(path).get(small_words) is None


def test_partial_or_foreign_ranking_ignored(tmp_path, small_words):
    cache = OpeningCache(tmp_path / "openings.json")
    cache.put(small_words, [ScoredGuess("slate", 2.0)])
    assert cache.get(small_words) is None

    foreign = [ScoredGuess("zebra", 1.0)] * len(small_words)
    cache.put(small_words, foreign)
    assert cache.get(small_words) is None


def test_unwritable_cache_still_ranks(tmp_path, small_words):
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    lines = []
    ranking = rank_openings(small_words, blocker / "openings.json", log=lines.append)
    assert ranking == rank_guesses(small_words.words, small_words.words)
    assert lines[-1].startswith("opening: could not write")
