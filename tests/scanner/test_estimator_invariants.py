"""Property-based tests for estimator invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from minestimator import compute_css_token_length, compute_js_token_length

# Code fragments with no quotes, slashes, stars or backticks, so whitespace
# between them is always in NORMAL mode.
plain_code = st.text(alphabet="abcxyz019.:;{}()[]#=+-,", min_size=1, max_size=12)
whitespace = st.text(alphabet=" \t\r\n", max_size=4)


class TestTotality:
    """Estimators never raise and stay within bounds."""

    @given(st.text(max_size=1000))
    @settings(max_examples=200)
    def test_css_bounded(self, source: str) -> None:
        assert 0 <= compute_css_token_length(source) <= len(source)

    @given(st.text(max_size=1000))
    @settings(max_examples=200)
    def test_js_bounded(self, source: str) -> None:
        assert 0 <= compute_js_token_length(source) <= len(source)

    @given(st.text(alphabet="/*!'\"`\\[]\n abc(=", max_size=200))
    @settings(max_examples=300)
    def test_no_exceptions_on_delimiters(self, source: str) -> None:
        """Any mix of delimiter characters scans without error."""
        assert compute_css_token_length(source) >= 0
        assert compute_js_token_length(source) >= 0


class TestWhitespaceIdempotence:
    """Whitespace between code fragments never changes the estimate."""

    @given(st.lists(st.tuples(plain_code, whitespace), max_size=20))
    @settings(max_examples=100)
    def test_css_whitespace_ignored(self, parts: list[tuple[str, str]]) -> None:
        spaced = "".join(code + ws for code, ws in parts)
        packed = "".join(code for code, _ in parts)
        assert compute_css_token_length(spaced) == len(packed)

    @given(st.lists(st.tuples(plain_code, whitespace), max_size=20))
    @settings(max_examples=100)
    def test_js_whitespace_ignored(self, parts: list[tuple[str, str]]) -> None:
        spaced = "".join(code + ws for code, ws in parts)
        packed = "".join(code for code, _ in parts)
        assert compute_js_token_length(spaced) == len(packed)


class TestOpacity:
    """Literal content is counted verbatim."""

    @given(st.text(alphabet=st.characters(exclude_characters="\"\\"), max_size=100))
    @settings(max_examples=100)
    def test_css_string_body_verbatim(self, body: str) -> None:
        literal = f'"{body}"'
        assert compute_css_token_length(f"a {{ content: {literal}; }}") == len(
            f"a{{content:{literal};}}"
        )

    @given(st.text(alphabet=st.characters(exclude_characters="'\\"), max_size=100))
    @settings(max_examples=100)
    def test_js_string_body_verbatim(self, body: str) -> None:
        literal = f"'{body}'"
        assert compute_js_token_length(f"x = {literal} ;") == len(f"x={literal};")

    @given(st.text(alphabet=st.characters(exclude_characters="`\\"), max_size=100))
    @settings(max_examples=100)
    def test_js_template_body_verbatim(self, body: str) -> None:
        literal = f"`{body}`"
        assert compute_js_token_length(f"x = {literal} ;") == len(f"x={literal};")

    @given(st.text(alphabet=st.characters(exclude_characters="*/!"), max_size=100))
    @settings(max_examples=100)
    def test_comments_contribute_nothing(self, body: str) -> None:
        assert compute_css_token_length(f"a{{}}/*{body}*/b{{}}") == 6
        assert compute_js_token_length(f"a;/*{body}*/b;") == 4

    @given(st.text(alphabet=st.characters(exclude_characters="\n"), max_size=100))
    @settings(max_examples=100)
    def test_js_line_comment_contributes_nothing(self, body: str) -> None:
        assert compute_js_token_length(f"a;//{body}\nb;") == 4


class TestFallbacks:
    """CSS abandons the estimate on an unclosed ordinary comment."""

    @given(
        st.text(alphabet="abc{}:;. \n", max_size=50),
        st.text(alphabet=st.characters(exclude_characters="*"), max_size=50),
    )
    @settings(max_examples=100)
    def test_css_unclosed_comment_full_length(self, prefix: str, tail: str) -> None:
        source = f"{prefix}/*{tail}"
        assert compute_css_token_length(source) == len(source)


class TestDeterminism:
    """Scanning is deterministic."""

    @given(st.text(max_size=300))
    @settings(max_examples=50)
    def test_repeated_scan_identical(self, source: str) -> None:
        assert compute_css_token_length(source) == compute_css_token_length(source)
        assert compute_js_token_length(source) == compute_js_token_length(source)
