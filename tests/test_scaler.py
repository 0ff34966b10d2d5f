import pytest

from flashgen.modules.flashcards.scaler import is_blank, scale, word_count


def words(n: int) -> str:
    return " ".join(["word"] * n)


@pytest.mark.parametrize(
    "n, expected",
    [(1, 4), (10, 4), (240, 4), (241, 5), (300, 5), (1200, 20), (1260, 20), (5000, 20)],
)
def test_scale_clamps_one_card_per_sixty_words(n, expected):
    assert scale(words(n)) == expected


def test_word_count_splits_on_any_whitespace():
    assert word_count("  The mitochondria\tis\n\nthe powerhouse  ") == 5


def test_sentence_gets_minimum_deck():
    text = "The mitochondria is the powerhouse of the cell."
    assert word_count(text) == 8
    assert scale(text) == 4


def test_scale_respects_custom_bounds():
    assert scale(words(100), words_per_card=10, min_cards=2, max_cards=8) == 8
    assert scale(words(5), words_per_card=10, min_cards=2, max_cards=8) == 2


@pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
def test_is_blank(text):
    assert is_blank(text)


def test_is_blank_false_for_text():
    assert not is_blank(" a ")
