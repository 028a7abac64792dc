"""Tests for blockscan utility modules."""

import logging


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        from blockscan.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "blockscan.mymodule"

    def test_logger_with_blockscan_prefix(self) -> None:
        from blockscan.utils.logger import get_logger

        logger = get_logger("blockscan.parser")
        assert logger.name == "blockscan.parser"

    def test_logger_name_starting_with_blockscan_not_submodule(self) -> None:
        """Names starting with 'blockscan' but not submodules should get prefix."""
        from blockscan.utils.logger import get_logger

        logger = get_logger("blockscan_other")
        assert logger.name == "blockscan.blockscan_other"

    def test_logger_exact_blockscan_name(self) -> None:
        from blockscan.utils.logger import get_logger

        assert get_logger("blockscan").name == "blockscan"

    def test_package_adds_no_handlers(self) -> None:
        import blockscan  # noqa: F401

        assert logging.getLogger("blockscan").handlers == []


class TestIncompleteInputLogging:
    """The processor reports incomplete input at debug level."""

    def test_debug_record(self, caplog) -> None:  # type: ignore[no-untyped-def]
        from blockscan import BlockProcessor

        with caplog.at_level(logging.DEBUG, logger="blockscan"):
            BlockProcessor("<!-- wp:unfinished").next_token()

        [record] = [r for r in caplog.records if r.name == "blockscan.lexer.core"]
        assert record.levelno == logging.DEBUG
        assert "offset 0" in record.getMessage()

    def test_rejected_attributes_debug_record(self, caplog) -> None:  # type: ignore[no-untyped-def]
        from blockscan import BlockProcessor

        processor = BlockProcessor('<!-- wp:chart {"max": 1e400} /-->')
        processor.next_token()
        with caplog.at_level(logging.DEBUG, logger="blockscan"):
            assert processor.parse_attributes() is None

        [record] = [r for r in caplog.records if r.name == "blockscan.attributes"]
        assert record.levelno == logging.DEBUG
        assert "1e400" in record.getMessage()
