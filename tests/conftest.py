import pytest

from wordle_entropy.words import WordList, load_default_word_list

SMALL = [
    "house", "mouse", "horse", "noise", "prose",
    "slate", "plane", "crane", "alley", "solar",
]


@pytest.fixture
def small_words() -> WordList:
    return WordList.from_words(SMALL)


@pytest.fixture(scope="session")
def default_words() -> WordList:
    return load_default_word_list()
