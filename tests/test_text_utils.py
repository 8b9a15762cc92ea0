from parser.text_utils import split, to_lower, tokenize, trim


def test_trim_strips_ascii_whitespace():
    assert trim(" \t hyena \r\n") == "hyena"


def test_trim_all_whitespace_is_empty():
    assert trim(" \t\n ") == ""


def test_trim_keeps_non_ascii_spaces():
    assert trim("\u00a0lion\u00a0") == "\u00a0lion\u00a0"


def test_to_lower_only_touches_ascii_letters():
    assert to_lower("HyEnA 42-Ä") == "hyena 42-Ä"


def test_split_keeps_interior_empty_segments():
    assert split("a, , b", ", ") == ["a", "", "b"]


def test_split_drops_trailing_empty_segment():
    assert split("a, b, ", ", ") == ["a", "b"]


def test_split_empty_input():
    assert split("", ", ") == []


def test_split_without_delimiter():
    assert split("lion", ", ") == ["lion"]


def test_tokenize_collapses_whitespace_runs():
    assert tokenize("  5 years\told   male hyena ") == ["5", "years", "old", "male", "hyena"]
