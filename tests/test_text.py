import pytest

from basickit.text import (
    category_chart,
    compare_strings,
    count_categories,
    remove_char,
    remove_duplicates,
    remove_extra_spaces,
    replace_spaces,
    split_digits_letters,
    split_words,
    to_upper_letters,
)

SAMPLE = "niyou dabing side 886 222## diewa~!"


def test_count_categories_sample():
    counts = count_categories(SAMPLE)
    assert counts == (20, 6, 9)


@pytest.mark.parametrize("text", ["", "abc", "123", "a1 b2!", SAMPLE])
def test_count_categories_sums_to_length(text):
    counts = count_categories(text)
    assert counts.alpha + counts.digits + counts.other == len(text)


def test_count_categories_non_ascii_is_other():
    counts = count_categories("é9")
    assert counts.digits == 1
    assert counts.alpha == 0
    assert counts.other == 1


def test_category_chart_shape():
    chart = category_chart(3, 1, 0).split("\n")
    assert len(chart) == 3 + 2
    assert chart[0] == "  3  "
    assert chart[-1] == " alp     num     oth"
    assert all(line.startswith("*****") for line in chart[1:-1])


def test_category_chart_orders_by_count():
    chart = category_chart(1, 5, 3).split("\n")
    assert chart[-1] == " num     oth     alp"
    assert chart[0] == "  5  "


def test_category_chart_ties_keep_order():
    chart = category_chart(2, 2, 2).split("\n")
    assert chart[-1] == " alp     num     oth"


def test_category_chart_rejects_negative():
    with pytest.raises(ValueError):
        category_chart(-1, 0, 0)


def test_split_digits_letters():
    text = "a1b2c3 d4"
    result = split_digits_letters(text)
    assert sorted(result) == sorted(text)
    assert result.startswith("1234")
    assert result[4:] == "abc d"


def test_replace_spaces_round_trip():
    text = "hello big world"
    result = replace_spaces(text)
    assert " " not in result
    assert result.count("%020") == text.count(" ")
    assert result.replace("%020", " ") == text


def test_remove_char():
    result = remove_char("banana", "a")
    assert "a" not in result
    assert result == "bnn"


def test_remove_char_requires_single_character():
    with pytest.raises(ValueError):
        remove_char("banana", "an")


def test_remove_duplicates_keeps_first_occurrences():
    text = "programming"
    result = remove_duplicates(text)
    assert len(result) == len(set(text))
    assert [text.index(c) for c in result] == sorted(text.index(c) for c in result)


def test_remove_extra_spaces():
    assert remove_extra_spaces("  hello   world  ") == "hello world"


@pytest.mark.parametrize("text", ["a  b", " x ", "one two", "   "])
def test_remove_extra_spaces_is_idempotent(text):
    once = remove_extra_spaces(text)
    assert remove_extra_spaces(once) == once
    assert "  " not in once


def test_split_words_matches_cleaned_text():
    text = "  the quick   brown fox "
    words = split_words(text)
    assert " ".join(words) == remove_extra_spaces(text)
    assert all(word and " " not in word for word in words)


@pytest.mark.parametrize(
    "first, second, expected",
    [("abc", "abd", -1), ("abd", "abc", 1), ("abc", "ab", 1), ("ab", "abc", -1), ("abc", "abc", 0)],
)
def test_compare_strings(first, second, expected):
    assert compare_strings(first, second) == expected


def test_to_upper_letters_stops_at_question_mark():
    result = to_upper_letters("ab1 C?xyz")
    assert result == "AB"


def test_to_upper_letters_without_stop():
    text = "hello"
    assert to_upper_letters(text) == text.upper()