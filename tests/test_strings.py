import pytest

from pushswap.strings import (
    itoa,
    split_words,
    str_chr,
    str_iteri,
    str_join,
    str_lcat,
    str_lcpy,
    str_mapi,
    str_ncmp,
    str_nstr,
    str_rchr,
    str_trim,
    substr,
)


@pytest.mark.parametrize("n", [-2134, 42, 707, -2147483648, 2147483647, 0])
def test_itoa_round_trip(n):
    assert int(itoa(n)) == n


def test_itoa_zero_and_sign():
    assert itoa(0) == "0"
    assert itoa(-2134).startswith("-")
    assert not itoa(707).startswith("-")


def test_split_words_collapses_separators():
    assert split_words("  1 2   3 ", " ") == ["1", "2", "3"]


def test_split_words_empty_and_blank():
    assert split_words("", " ") == []
    assert split_words("     ", " ") == []


def test_split_words_pieces_have_no_separator():
    pieces = split_words("a,,b,c,,,dd,", ",")
    assert all(piece and "," not in piece for piece in pieces)
    assert "".join(pieces) == "a,,b,c,,,dd,".replace(",", "")


def test_split_words_rejects_long_separator():
    with pytest.raises(ValueError):
        split_words("a b", "  ")


def test_str_chr():
    assert str_chr("tripouille", "z") is None
    assert str_chr("tripouille", "t") == 0
    assert str_chr("tripouille", "\0") == len("tripouille")


def test_str_chr_finds_first():
    idx = str_chr("tripouille", "i")
    assert "tripouille"[idx] == "i"
    assert "i" not in "tripouille"[:idx]


def test_str_rchr_finds_last():
    idx = str_rchr("tripouille", "i")
    assert "tripouille"[idx] == "i"
    assert "i" not in "tripouille"[idx + 1:]
    assert str_rchr("tripouille", "z") is None
    assert str_rchr("tripouille", "\0") == len("tripouille")


def test_str_nstr_found_within_length():
    idx = str_nstr("abcdef", "def", 6)
    assert "abcdef"[idx:idx + 3] == "def"


def test_str_nstr_needle_must_fit():
    assert str_nstr("abcdef", "def", 5) is None
    assert str_nstr("abcdef", "xyz", 6) is None


def test_str_nstr_empty_needle():
    assert str_nstr("abcdef", "", 0) == 0


def test_str_ncmp_equal_and_zero_length():
    assert str_ncmp("abc", "abc", 10) == 0
    assert str_ncmp("abc", "xyz", 0) == 0
    assert str_ncmp("abc", "abd", 2) == 0


def test_str_ncmp_ordering():
    assert str_ncmp("abc", "abd", 3) < 0
    assert str_ncmp("abd", "abc", 3) > 0
    assert str_ncmp("ab", "abc", 5) < 0
    assert str_ncmp("abc", "ab", 5) == ord("c")


def test_str_ncmp_antisymmetric():
    assert str_ncmp("hello", "help", 5) == -str_ncmp("help", "hello", 5)


def test_str_lcpy_fits():
    assert str_lcpy("Hello", 10) == ("Hello", len("Hello"))


def test_str_lcpy_truncates():
    copied, total = str_lcpy("Hello", 3)
    assert copied == "Hello"[:2]
    assert total == len("Hello")


def test_str_lcpy_size_zero():
    assert str_lcpy("Hello", 0) == ("", len("Hello"))


def test_str_lcpy_negative_size():
    with pytest.raises(ValueError):
        str_lcpy("Hello", -1)


def test_str_lcat_fits():
    result, total = str_lcat("Hello", " world", 64)
    assert result == "Hello" + " world"
    assert total == len("Hello") + len(" world")


def test_str_lcat_partial():
    result, total = str_lcat("ab", "cdef", 5)
    assert result == "ab" + "cdef"[:2]
    assert len(result) == 5 - 1
    assert total == len("ab") + len("cdef")


def test_str_lcat_dest_fills_buffer():
    assert str_lcat("Hello", " world", 3) == ("Hello", len(" world") + 3)


def test_str_join():
    assert str_join("Hello", " world") == "Hello" + " world"
    assert str_join(None, "x") == "x"
    assert str_join("x", None) == "x"
    assert str_join(None, None) == ""


def test_substr():
    assert substr("Hello", 1, 3) == "Hello"[1:4]
    assert substr("Hello", 2, 100) == "Hello"[2:]
    assert substr("Hello", 5, 2) == ""
    assert substr("Hello", 0, 0) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("Hello", -1, 2)
    with pytest.raises(ValueError):
        substr("Hello", 0, -2)


def test_str_trim():
    assert str_trim("   xxx   xxx", " x") == ""
    assert str_trim("  hi  ", " ") == "hi"
    assert str_trim(" a ", "") == " a "


def test_str_trim_keeps_inner_characters():
    assert str_trim("xx a x b xx", "x") == " a x b "


def test_str_iteri_visits_in_order():
    seen = []
    str_iteri("abc", lambda i, c: seen.append((i, c)))
    assert seen == list(enumerate("abc"))


def test_str_iteri_without_function():
    assert str_iteri("abc", None) is None


def test_str_mapi_capitalises_even_positions():
    def upper_even(i, c):
        return c.upper() if i % 2 == 0 else c

    assert str_mapi("hello", upper_even) == "HeLlO"


def test_str_mapi_identity_and_none():
    assert str_mapi("hello", None) == "hello"
    assert str_mapi("hello", lambda i, c: c) == "hello"
    assert len(str_mapi("hello", lambda i, c: "z")) == len("hello")