"""Tests for whole-document parsing."""

import logging

import pytest

from blockscan import BlockNode, parse_blocks


class TestParseBlocks:
    """parse_blocks() output and recovery."""

    def test_empty_document(self) -> None:
        assert parse_blocks("") == []

    def test_mixed_document(self) -> None:
        blocks = parse_blocks("intro<!-- wp:spacer /--><!-- wp:quote -->q<!-- /wp:quote -->")
        assert [block.block_name for block in blocks] == [None, "core/spacer", "core/quote"]
        assert blocks[0].inner_html == "intro"
        assert blocks[2].inner_html == "q"

    def test_stray_closer_is_skipped(self) -> None:
        blocks = parse_blocks("a<!-- /wp:orphan -->b")
        assert blocks == [BlockNode.freeform("a"), BlockNode.freeform("b")]

    def test_invalid_delimiter_stays_in_html(self) -> None:
        [block] = parse_blocks("<p>x</p><!-- wp:Bad --><p>y</p>")
        assert block.inner_html == "<p>x</p><!-- wp:Bad --><p>y</p>"

    def test_incomplete_tail_kept_as_freeform(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="blockscan"):
            blocks = parse_blocks('<!-- wp:spacer /--><!-- wp:image {"id":')

        assert blocks == [
            BlockNode("core/spacer"),
            BlockNode.freeform('<!-- wp:image {"id":'),
        ]
        assert any(record.levelno == logging.WARNING for record in caplog.records)

    def test_incomplete_tail_inside_open_block(self) -> None:
        [group] = parse_blocks("<!-- wp:group --><p>a</p><!-- /wp:gro")
        assert group.block_name == "core/group"
        assert group.inner_html == "<p>a</p><!-- /wp:gro"
        assert group.inner_content == ("<p>a</p><!-- /wp:gro",)

    def test_incomplete_tail_goes_to_innermost_block(self) -> None:
        [outer] = parse_blocks("<!-- wp:outer --><!-- wp:inner -->x<!-- wp:ima")
        [inner] = outer.inner_blocks
        assert outer.inner_html == ""
        assert outer.inner_content == (None,)
        assert inner.inner_html == "x<!-- wp:ima"
        assert inner.inner_content == ("x<!-- wp:ima",)

    def test_incomplete_tail_after_closed_child(self) -> None:
        [outer] = parse_blocks("<!-- wp:outer --><!-- wp:a /--><!-")
        assert outer.inner_blocks == (BlockNode("core/a"),)
        assert outer.inner_content == (None, "<!-")
        assert outer.inner_html == "<!-"

    def test_whitespace_freeform_kept_by_default(self) -> None:
        blocks = parse_blocks("<!-- wp:a /-->\n<!-- wp:b /-->")
        assert blocks[1] == BlockNode.freeform("\n")
