import io

import pytest

from wordlabs.interleave import (
    ERROR_EMPTY,
    ERROR_ONLY_DELIMITERS,
    get_words,
    interleave_words,
    is_empty,
    main,
    only_delimiters,
)


def test_get_words_skips_repeated_spaces():
    text = "  alpha  beta gamma "
    assert get_words(text) == text.split()


def test_get_words_only_spaces_gives_nothing():
    assert get_words("     ") == []


def test_get_words_keeps_punctuation_inside_words():
    words = get_words("a,b c.d")
    assert len(words) == 2
    assert words[0].startswith("a,")


def test_is_empty():
    assert is_empty("") is True
    assert is_empty(" ") is False


def test_only_delimiters():
    assert only_delimiters(" ,.!? ") is True
    assert only_delimiters(".. 7 ..") is False
    assert only_delimiters("") is True


def test_interleave_worked_example():
    assert interleave_words("a b c", "x y") == "a x b y c"


def test_interleave_preserves_all_words():
    first = "one two three four"
    second = "red green"
    result = interleave_words(first, second).split()
    assert sorted(result) == sorted(first.split() + second.split())
    assert result[0] == "one"
    assert result[1] == "red"


def test_interleave_longer_second_line():
    result = interleave_words("p", "q r s").split()
    assert result[:2] == ["p", "q"]
    assert result[2:] == ["r", "s"]


def test_interleave_one_side_empty():
    assert interleave_words("", "hello world") == "hello world"


def test_both_empty_raises():
    with pytest.raises(ValueError, match=ERROR_EMPTY):
        interleave_words("", "")


def test_both_only_delimiters_raises():
    with pytest.raises(ValueError, match=ERROR_ONLY_DELIMITERS):
        interleave_words(" ,, ", "!!")


def test_empty_and_delimiters_raises_only_delimiters():
    with pytest.raises(ValueError, match=ERROR_ONLY_DELIMITERS):
        interleave_words("", "  ")


def test_main_prints_result(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a b c\nx y\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.endswith(interleave_words("a b c", "x y") + "\n")
    assert "Input 1st string:" in out


def test_main_reports_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n\n"))
    assert main() == 0
    captured = capsys.readouterr()
    assert ERROR_EMPTY in captured.err