import itertools

import pytest

from contestkit.text import (
    abbreviate,
    apply_statements,
    can_say_hello,
    capitalize_first,
    compare_ignore_case,
    count_sorted_variants,
    fix_caps_lock,
    fix_word_case,
    gender_verdict,
    rearrange_sum,
    stones_to_remove,
    strip_vowels,
    winning_team,
)


def test_apply_statements():
    assert apply_statements(["X++"] * 3) == 3
    assert apply_statements(["++X", "X--"]) == 0
    assert apply_statements(["--X", "noop", "X--"]) == -2


@pytest.mark.parametrize("word", ["hELLO", "Zoo", "aBC", "x"])
def test_fix_caps_lock_shape(word):
    fixed = fix_caps_lock(word)
    assert fixed[0] == word[0].upper()
    assert fixed[1:] == word[1:].lower()
    assert fix_caps_lock(fixed) == fixed


def test_fix_caps_lock_empty():
    assert fix_caps_lock("") == ""


def test_winning_team():
    assert winning_team(["A", "B", "A"]) == "A"
    assert winning_team(["ONLY"]) == "ONLY"
    assert winning_team([]) == ""


def test_rearrange_sum_example():
    assert rearrange_sum("3+2+1") == "1+2+3"


@pytest.mark.parametrize("expression", ["1+1+3+1+3", "2", "3+3+2+1+1"])
def test_rearrange_sum_is_sorted_permutation(expression):
    result = rearrange_sum(expression)
    terms = result.split("+")
    assert terms == sorted(terms)
    assert sorted(terms) == sorted(expression.split("+"))


def test_compare_ignore_case():
    assert compare_ignore_case("aaaa", "aaaA") == 0
    assert compare_ignore_case("abs", "Abz") == -1
    assert compare_ignore_case("Abz", "abs") == 1


def test_compare_ignore_case_rejects_length_mismatch():
    with pytest.raises(ValueError):
        compare_ignore_case("abc", "ab")


@pytest.mark.parametrize("colors", ["RRG", "RRRRR", "BRBG", "R"])
def test_stones_to_remove_leaves_runs(colors):
    runs = sum(1 for _ in itertools.groupby(colors))
    assert len(colors) - stones_to_remove(colors) == runs


def test_stones_to_remove_alternating():
    assert stones_to_remove("RGBRGB") == 0


def test_abbreviate_keeps_short_words():
    assert abbreviate("word") == "word"
    assert abbreviate("abcdefghij") == "abcdefghij"


def test_abbreviate_example():
    assert abbreviate("localization") == "l10n"


def test_abbreviate_long_word_shape():
    word = "pneumonoultramicroscopicsilicovolcanoconiosis"
    short = abbreviate(word)
    assert short[0] == word[0]
    assert short[-1] == word[-1]
    assert int(short[1:-1]) == len(word) - 2


@pytest.mark.parametrize("word", ["konjac", "ApPLe", "x"])
def test_capitalize_first(word):
    result = capitalize_first(word)
    assert result[0] == word[0].upper()
    assert result[1:] == word[1:]


def test_can_say_hello():
    assert can_say_hello("ahhellllloou")
    assert can_say_hello("hello")
    assert not can_say_hello("hlelo")
    assert not can_say_hello("")


def test_gender_verdict():
    assert gender_verdict("wjmzbmr") == "CHAT WITH HER!"
    assert gender_verdict("xiaodao") == "IGNORE HIM!"


@pytest.mark.parametrize("word", ["tour", "Codeforces", "aBAcAba", "AEIOUY"])
def test_strip_vowels_shape(word):
    result = strip_vowels(word)
    assert result[::2] == "." * (len(result) // 2)
    assert not set(result[1::2]) & set("aoyeui")
    assert result[1::2] == result[1::2].lower()
    assert len(result) == 2 * sum(1 for c in word if c.lower() not in "aoyeui")


def test_fix_word_case():
    assert fix_word_case("HoUse") == "HoUse".lower()
    assert fix_word_case("ViP") == "ViP".upper()
    assert fix_word_case("maTRIx") == "maTRIx".lower()


def test_count_sorted_variants_single_letter_ranges():
    assert count_sorted_variants("baacb", [(1, 1), (3, 3), (5, 5)]) == 1


def test_count_sorted_variants_no_ranges():
    assert count_sorted_variants("abc", []) == 0


def test_count_sorted_variants_distinct():
    assert count_sorted_variants("cba", [(1, 3), (1, 3)]) == 1
    assert count_sorted_variants("cba", [(1, 2), (2, 3)]) == 2


def test_count_sorted_variants_rejects_bad_range():
    with pytest.raises(ValueError):
        count_sorted_variants("abc", [(0, 2)])
    with pytest.raises(ValueError):
        count_sorted_variants("abc", [(2, 4)])