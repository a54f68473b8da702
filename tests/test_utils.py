"""Tests for marklex utility modules and error classes."""


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        from marklex.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "marklex.mymodule"

    def test_logger_with_marklex_prefix(self) -> None:
        from marklex.utils.logger import get_logger

        logger = get_logger("marklex.config")
        assert logger.name == "marklex.config"

    def test_logger_name_starting_with_marklex_not_submodule(self) -> None:
        """Names starting with 'marklex' but not submodules should get prefix."""
        from marklex.utils.logger import get_logger

        logger = get_logger("marklex_other")
        assert logger.name == "marklex.marklex_other"

    def test_logger_exact_marklex_name(self) -> None:
        from marklex.utils.logger import get_logger

        logger = get_logger("marklex")
        assert logger.name == "marklex"

    def test_root_logger_has_null_handler(self) -> None:
        """Importing marklex installs a NullHandler and nothing that emits."""
        import logging

        from marklex.utils.logger import ROOT_LOGGER_NAME

        root = logging.getLogger(ROOT_LOGGER_NAME)
        assert root.handlers
        assert all(isinstance(h, logging.NullHandler) for h in root.handlers)

    def test_child_loggers_add_no_handlers(self) -> None:
        from marklex.utils.logger import get_logger

        assert get_logger("normalize").handlers == []

    def test_module_loggers_share_namespace(self) -> None:
        from marklex import config

        assert config.logger.name == "marklex.config"


class TestErrors:
    """Tests for error classes."""

    def test_marklex_error(self) -> None:
        from marklex.errors import MarklexError

        error = MarklexError("Something went wrong")
        assert str(error) == "Something went wrong"

    def test_config_error(self) -> None:
        from marklex.errors import ConfigError, MarklexError

        error = ConfigError("tab_width", "must be >= 1, got 0")
        assert isinstance(error, MarklexError)
        assert error.field == "tab_width"
        assert "tab_width" in str(error)
        assert "must be >= 1" in str(error)


class TestPublicAPI:
    def test_all_exports_importable(self) -> None:
        import marklex

        for name in marklex.__all__:
            assert hasattr(marklex, name), f"{name} in __all__ but not importable"

    def test_utils_exports(self) -> None:
        import marklex.utils as utils

        for name in utils.__all__:
            assert hasattr(utils, name)

    def test_doc_examples(self) -> None:
        from marklex import (
            collapse_whitespace,
            detab,
            is_valid_scheme,
            replace_null_chars,
            strip_atx_suffix,
        )

        assert is_valid_scheme("HTTP")
        assert not is_valid_scheme("foo")
        assert collapse_whitespace("  a   b\tc  ") == "a b c"
        assert detab("a\tb") == "a   b"
        assert strip_atx_suffix("Heading ###") == "Heading"
        assert strip_atx_suffix("Heading###") == "Heading###"
        assert replace_null_chars("a\x00b") == "a\ufffdb"
