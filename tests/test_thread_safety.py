"""Thread safety tests for marklex.

The tables are shared frozensets and configuration lives in a ContextVar.
These tests run the primitives from many threads at once, each with its own
tab width, and check that nobody sees another thread's settings.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed

from marklex import (
    SCHEMES,
    LexConfig,
    collapse_whitespace,
    detab,
    is_punctuation,
    is_valid_scheme,
    lex_config_context,
)


def _work(tab_width: int) -> tuple[int, str, bool, bool, str]:
    with lex_config_context(LexConfig(tab_width=tab_width)):
        expanded = ""
        for _ in range(200):
            expanded = detab("\tx")
        return (
            tab_width,
            expanded,
            is_punctuation("\u2014"),
            is_valid_scheme("HTTPS"),
            collapse_whitespace(" a \t b "),
        )


class TestConcurrentUse:
    def test_per_thread_tab_width(self) -> None:
        widths = [1, 2, 3, 4, 5, 8] * 10
        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = [pool.submit(_work, width) for width in widths]
            results = [future.result() for future in as_completed(futures)]

        assert len(results) == len(widths)
        for width, expanded, punct, scheme, collapsed in results:
            assert expanded == " " * width + "x"
            assert punct
            assert scheme
            assert collapsed == "a b"

    def test_shared_scheme_table_unchanged(self) -> None:
        before = frozenset(SCHEMES)
        with ThreadPoolExecutor(max_workers=4) as pool:
            list(pool.map(is_valid_scheme, sorted(SCHEMES) * 4))
        assert SCHEMES == before
