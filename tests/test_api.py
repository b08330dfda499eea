"""Tests for the public parse() API.

Covers every construct, nesting, the literal fallbacks for malformed
markup, mention and emoji resolution, and link normalization.
"""

import pytest

from chatmarkup import (
    Bold,
    Code,
    Emoji,
    InvalidInputError,
    Italic,
    Link,
    MarkupOptions,
    Mention,
    Strike,
    parse,
)

MENTIONS = ["testOne", "testTwo", "testOneTwo"]


class TestInputValidation:
    """parse() only accepts strings."""

    def test_accepts_string(self) -> None:
        assert parse("some text") == ["some text"]

    def test_empty_string(self) -> None:
        assert parse("") == []

    @pytest.mark.parametrize("value", [["some", "array"], None, 42, b"bytes"])
    def test_rejects_non_string(self, value: object) -> None:
        with pytest.raises(InvalidInputError):
            parse(value)  # type: ignore[arg-type]

    def test_error_is_type_error(self) -> None:
        with pytest.raises(TypeError, match="Expected a string, got list"):
            parse(["some", "array"])  # type: ignore[arg-type]


class TestSimpleMarkup:
    """Bold, italic and strike spans."""

    def test_bold(self) -> None:
        assert parse("some *bold* text") == ["some ", Bold(("bold",)), " text"]

    def test_italic(self) -> None:
        assert parse("some _italic_ text") == ["some ", Italic(("italic",)), " text"]

    def test_strike(self) -> None:
        assert parse("some ~stroke~ text") == ["some ", Strike(("stroke",)), " text"]

    def test_no_markup_in_the_middle_of_words(self) -> None:
        assert parse("underscored_words are fun_!") == ["underscored_words are fun_!"]

    def test_incomplete_markup_is_literal(self) -> None:
        assert parse("a * b") == ["a * b"]

    def test_doubled_delimiters_are_literal(self) -> None:
        assert parse("**not bold**") == ["**not bold**"]
        assert parse("__init__") == ["__init__"]

    def test_closing_delimiter_must_precede_non_word(self) -> None:
        assert parse("*a*b*") == [Bold(("a*b",))]

    def test_span_followed_by_punctuation(self) -> None:
        assert parse("*really*?") == [Bold(("really",)), "?"]

    def test_non_ascii_letter_is_a_word_character(self) -> None:
        # Word characters follow Unicode, so é cannot follow a closing delimiter
        assert parse("_abc_.") == [Italic(("abc",)), "."]
        assert parse("_abc_é") == ["_abc_é"]
        assert parse("*ß*ü *ok*") == [Bold(("ß*ü *ok",))]

    def test_nested_markup(self) -> None:
        assert parse("*bold _italic_*") == [
            Bold(("bold ", Italic(("italic",)))),
        ]

    def test_deep_nesting(self) -> None:
        assert parse("~*_deep_*~") == [Strike((Bold((Italic(("deep",)),)),))]


class TestCodeSpans:
    """Code spans keep their content verbatim."""

    def test_inline_code(self) -> None:
        assert parse("some `monospace` text") == ["some ", Code(("monospace",)), " text"]

    def test_code_inside_other_markup(self) -> None:
        assert parse("*_`monospace`_*") == [
            Bold((Italic((Code(("monospace",)),)),)),
        ]

    def test_no_markup_inside_code(self) -> None:
        assert parse("a `b *c* _d_` e") == ["a ", Code(("b *c* _d_",)), " e"]

    def test_no_mentions_or_links_inside_code(self) -> None:
        nodes = parse("`@bob www.test.com :x:`", {"mentions": ["bob"]})
        assert nodes == [Code(("@bob www.test.com :x:",))]

    def test_code_property(self) -> None:
        (node,) = parse("`x = 1`")
        assert isinstance(node, Code)
        assert node.code == "x = 1"


class TestLinks:
    """URLs become links with a normalized href."""

    def test_schemed_links(self) -> None:
        assert parse("https://hoi.com/") == [
            Link(text="https://hoi.com/", href="https://hoi.com/"),
        ]
        assert parse("something about http://hoi.com/") == [
            "something about ",
            Link(text="http://hoi.com/", href="http://hoi.com/"),
        ]

    def test_www_links(self) -> None:
        assert parse("www.test.com") == [
            Link(text="www.test.com", href="http://www.test.com"),
        ]

    def test_link_with_port_path_and_query(self) -> None:
        url = "http://localhost:8080/path?q=1#frag"
        assert parse(f"see {url} now") == ["see ", Link(text=url, href=url), " now"]

    def test_uppercase_scheme_is_kept(self) -> None:
        assert parse("HTTPS://EXAMPLE.COM") == [
            Link(text="HTTPS://EXAMPLE.COM", href="HTTPS://EXAMPLE.COM"),
        ]

    def test_bare_domain_is_not_a_link(self) -> None:
        assert parse("example.com") == ["example.com"]

    def test_protocol_relative_link(self) -> None:
        assert parse("//cdn.test.com/x") == [
            Link(text="//cdn.test.com/x", href="http:////cdn.test.com/x"),
        ]

    def test_link_inside_bold(self) -> None:
        assert parse("*https://a.io/x* y") == [
            Bold((Link(text="https://a.io/x", href="https://a.io/x"),)),
            " y",
        ]


class TestEmoji:
    """:shortcode: emoji."""

    def test_emoji(self) -> None:
        assert parse("an :emoji:!") == ["an ", Emoji("emoji"), "!"]

    def test_emoji_charset(self) -> None:
        assert parse("and :emoji_with_underscores:") == [
            "and ",
            Emoji("emoji_with_underscores"),
        ]
        assert parse("and :emoji-with-dashes+pluses:") == [
            "and ",
            Emoji("emoji-with-dashes+pluses"),
        ]

    def test_invalid_shortcode_is_text(self) -> None:
        assert parse(":not an emoji:") == [":not an emoji:"]
        assert parse("::") == ["::"]

    def test_whitelist_ignores_case(self) -> None:
        assert parse(":a: :A:", {"emojiNames": ["a"]}) == [Emoji("a"), " ", Emoji("a")]
        assert parse(":aBC: :abc:", {"emojiNames": ["ABc"]}) == [
            Emoji("ABc"),
            " ",
            Emoji("ABc"),
        ]

    def test_emoji_beats_italic(self) -> None:
        assert parse("_it's :emoji_time:!") == ["_it's ", Emoji("emoji_time"), "!"]

    def test_emoji_inside_italic(self) -> None:
        assert parse("_it's :emoji_time:!_") == [
            Italic(("it's ", Emoji("emoji_time"), "!")),
        ]

    def test_only_whitelisted_emoji(self) -> None:
        options = MarkupOptions(emoji_names=("b",))
        assert parse(":a: :b: :c:", options) == [":a: ", Emoji("b"), " :c:"]

    def test_empty_whitelist_rejects_all(self) -> None:
        assert parse(":a:", MarkupOptions(emoji_names=())) == [":a:"]


class TestMentions:
    """@-mentions of configured names."""

    def test_mentions(self) -> None:
        options = {"mentions": MENTIONS}
        assert parse("hello @testOne", options) == [
            "hello ",
            Mention(mention="testone", raw="testOne"),
        ]
        assert parse("@testOne hello", options) == [
            Mention(mention="testone", raw="testOne"),
            " hello",
        ]
        assert parse("hello @testOne!!", options) == [
            "hello ",
            Mention(mention="testone", raw="testOne"),
            "!!",
        ]

    def test_longest_name_wins(self) -> None:
        assert parse("@testOneTwo", {"mentions": MENTIONS}) == [
            Mention(mention="testonetwo", raw="testOneTwo"),
        ]

    def test_partial_name_is_not_a_mention(self) -> None:
        assert parse("@testOneThree", {"mentions": MENTIONS}) == ["@testOneThree"]

    def test_case_insensitive_keeps_typed_casing(self) -> None:
        assert parse("@TESTONE", {"mentions": MENTIONS}) == [
            Mention(mention="testone", raw="TESTONE"),
        ]

    def test_punctuation_in_names(self) -> None:
        options = {"mentions": ["user[AFK]"]}
        assert parse("@user[AFK] hello!", options) == [
            Mention(mention="user[afk]", raw="user[AFK]"),
            " hello!",
        ]
        assert parse("hello @user[AFK]", options) == [
            "hello ",
            Mention(mention="user[afk]", raw="user[AFK]"),
        ]

    def test_no_clear_word_boundary(self) -> None:
        assert parse("hello @ReAnna!!!", {"mentions": ["ReAnna!!"]}) == [
            "hello ",
            Mention(mention="reanna!!", raw="ReAnna!!"),
            "!",
        ]

    def test_non_ascii_letter_extends_the_name(self) -> None:
        options = {"mentions": ["bob"]}
        assert parse("@bobé", options) == ["@bobé"]
        assert parse("@bob…", options) == [Mention(mention="bob", raw="bob"), "…"]

    def test_without_configured_names(self) -> None:
        assert parse("hello @someone") == ["hello @someone"]
        assert parse("@") == ["@"]

    def test_mention_inside_bold(self) -> None:
        assert parse("*hey @bob*", {"mentions": ["bob"]}) == [
            Bold(("hey ", Mention(mention="bob", raw="bob"))),
        ]


class TestWhitespace:
    """Spacing is preserved exactly."""

    def test_leading_whitespace(self) -> None:
        assert parse("  hi") == ["  hi"]

    def test_newline_after_span(self) -> None:
        assert parse("*a*\nb") == [Bold(("a",)), "\nb"]

    def test_runs_of_spaces_split_text(self) -> None:
        assert parse("a  b") == ["a ", " b"]
