"""Tests for the line wrapper's placement, rescue, and truncation rules.

Lengths below are rendered lengths with the default "> " prefix, so the
first word of a blockquote starts after 2 characters.
"""

from blockquote_formatter.config import build_config
from blockquote_formatter.wrapper import LineWrapper

FIRST = 2  # lead for the first paragraph: one "> " prefix
LATER = 4  # lead for later paragraphs: separator line + new line prefix


def _wrap(words, lead=FIRST, **options):
    wrapper = LineWrapper(build_config(**options))
    return wrapper, list(wrapper.wrap(words, lead))


# ---------------------------------------------------------------------------
# Unbounded wrapping
# ---------------------------------------------------------------------------


class TestUnbounded:
    def test_paragraph_is_one_line(self):
        wrapper, lines = _wrap(["hey,", "this", "is", "cool!"])
        assert lines == ["hey, this is cool!"]
        assert wrapper.truncated is False

    def test_length_counts_prefix_and_spaces(self):
        wrapper, _ = _wrap(["ab", "cd"])
        assert wrapper.length == 7  # "> ab cd"

    def test_later_paragraph_pays_separator(self):
        wrapper = LineWrapper(build_config())
        list(wrapper.wrap(["ab"], FIRST))
        list(wrapper.wrap(["cd"], LATER))
        assert wrapper.length == 10  # "> ab" + "> " + "> cd"

    def test_empty_paragraph_yields_nothing(self):
        _, lines = _wrap([])
        assert lines == []


# ---------------------------------------------------------------------------
# Line width
# ---------------------------------------------------------------------------


class TestLineWidth:
    def test_greedy_wrap(self):
        _, lines = _wrap(["aaa", "bbb", "ccc", "ddd"], line_width=10)
        assert lines == ["aaa bbb", "ccc ddd"]

    def test_word_exactly_filling_width_stays(self):
        _, lines = _wrap(["aaa", "bbbb"], line_width=10)
        assert lines == ["aaa bbbb"]

    def test_long_word_gets_its_own_line(self):
        _, lines = _wrap(["a", "abcdefgh", "b"], line_width=6)
        assert lines == ["a", "abcdefgh", "b"]

    def test_first_word_longer_than_width_not_split(self):
        _, lines = _wrap(["abcdefghij"], line_width=5)
        assert lines == ["abcdefghij"]

    def test_new_line_costs_a_prefix(self):
        wrapper, _ = _wrap(["aaa", "bbb", "ccc", "ddd"], line_width=10)
        assert wrapper.length == 18  # "> aaa bbb" + "> ccc ddd"


# ---------------------------------------------------------------------------
# Soft and hard limits
# ---------------------------------------------------------------------------


class TestLimits:
    def test_within_soft_limit(self):
        wrapper, lines = _wrap(["aaaa", "bbbb"], soft_limit=11)
        assert lines == ["aaaa bbbb"]
        assert wrapper.truncated is False

    def test_hard_limit_rescues_word_in_progress(self):
        wrapper, lines = _wrap(["aaaa", "bbbbbbb", "cc"], soft_limit=10, hard_limit=5)
        assert lines == ["aaaa bbbbbbb"]
        assert wrapper.length == 14
        assert wrapper.truncated is True

    def test_no_word_starts_past_soft_limit(self):
        wrapper, lines = _wrap(["aaaaaaa", "b"], soft_limit=10, hard_limit=50)
        # "b" would start at 10, which is not below the soft limit
        assert lines == ["aaaaaaa"]
        assert wrapper.truncated is True

    def test_word_past_hard_limit_is_cut(self):
        wrapper, lines = _wrap(["aaaa", "bbbbbbbbbb"], soft_limit=10, hard_limit=2)
        # cut leaves room for the one-character ellipsis at 12
        assert lines == ["aaaa bbbb"]
        assert wrapper.length == 11
        assert wrapper.truncated is True

    def test_cut_without_ellipsis_uses_full_budget(self):
        wrapper, lines = _wrap(
            ["aaaa", "bbbbbbbbbb"], soft_limit=10, hard_limit=2, with_ellipsis=False,
        )
        assert lines == ["aaaa bbbbb"]
        assert wrapper.length == 12

    def test_zero_hard_limit_never_rescues(self):
        _, lines = _wrap(["aaaa", "bbbbbbbb"], soft_limit=10)
        assert lines == ["aaaa bb"]

    def test_word_with_no_surviving_characters_is_dropped(self):
        wrapper, lines = _wrap(["aaaaaa", "bb"], soft_limit=10)
        assert lines == ["aaaaaa"]
        assert wrapper.length == 8
        assert wrapper.truncated is True

    def test_first_word_always_starts(self):
        wrapper, lines = _wrap(["supercalifragilistic"], soft_limit=10, hard_limit=2)
        assert lines == ["supercali"]
        assert wrapper.truncated is True

    def test_first_word_with_no_room_keeps_one_character(self):
        wrapper, lines = _wrap(["abcdef"], soft_limit=3)
        assert lines == ["a"]
        assert wrapper.truncated is True

    def test_codepoints_not_bytes(self):
        _, lines = _wrap(["héllo", "wörld"], soft_limit=12)
        assert lines == ["héllo wör"]


# ---------------------------------------------------------------------------
# Truncation cascade
# ---------------------------------------------------------------------------


class TestCascade:
    def test_truncated_wrapper_yields_nothing_more(self):
        wrapper = LineWrapper(build_config(soft_limit=12))
        list(wrapper.wrap(["aaaa", "bbbbbbbbbbbbb"], FIRST))
        assert wrapper.truncated is True
        assert list(wrapper.wrap(["more"], LATER)) == []

    def test_next_paragraph_refused_at_soft_limit(self):
        wrapper = LineWrapper(build_config(soft_limit=10))
        assert list(wrapper.wrap(["aaaaaa"], FIRST)) == ["aaaaaa"]
        assert list(wrapper.wrap(["b"], LATER)) == []
        assert wrapper.truncated is True

    def test_wrapped_line_refused_closes_previous(self):
        wrapper, lines = _wrap(["aaa", "bbb", "ccc", "ddd"], line_width=10, soft_limit=15)
        assert lines == ["aaa bbb", "ccc"]
        assert wrapper.truncated is True

    def test_cut_word_on_new_line(self):
        wrapper, lines = _wrap(["aaa", "bbbbbbbbbb"], line_width=8, soft_limit=12)
        # "bbbbbbbbbb" moves to a new line starting at 7 and is cut at 11
        assert lines == ["aaa", "bbbb"]
        assert wrapper.truncated is True
