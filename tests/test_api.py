"""Tests for the high-level blockscan API."""


class TestPackageExports:
    """Tests for top-level imports."""

    def test_version(self) -> None:
        import blockscan

        assert blockscan.__version__ == "0.1.0"

    def test_all_names_resolve(self) -> None:
        import blockscan

        for name in blockscan.__all__:
            assert hasattr(blockscan, name), name


class TestParseBlocksFunction:
    """Tests for the parse_blocks() function."""

    def test_parse_paragraph(self) -> None:
        from blockscan import parse_blocks

        blocks = parse_blocks("<!-- wp:paragraph --><p>Hi</p><!-- /wp:paragraph -->")
        assert len(blocks) == 1
        assert blocks[0].block_name == "core/paragraph"
        assert blocks[0].inner_html == "<p>Hi</p>"

    def test_parse_and_serialize(self) -> None:
        from blockscan import parse_blocks, serialize_blocks

        markup = '<!-- wp:heading {"level":2} --><h2>Hi</h2><!-- /wp:heading -->'
        assert serialize_blocks(parse_blocks(markup)) == markup


class TestBlockProcessorClass:
    """Tests for driving the processor directly."""

    def test_basic_usage(self) -> None:
        from blockscan import BlockProcessor

        processor = BlockProcessor('<!-- wp:image {"id":7} /-->')
        assert processor.next_delimiter()
        assert processor.get_block_type() == "core/image"
        assert processor.parse_attributes() == {"id": 7}

    def test_printable_types(self) -> None:
        from blockscan import BlockProcessor

        processor = BlockProcessor("<!-- wp:image /--><p>Hi</p>")
        printed = []
        while processor.next_token():
            printed.append(processor.get_printable_block_type())
        assert printed == ["core/image", "core/freeform"]

    def test_find_all_images(self) -> None:
        """Typical use: pick out every block of one type."""
        from blockscan import BlockProcessor

        processor = BlockProcessor(
            '<!-- wp:group --><!-- wp:image {"id":1} /--><!-- /wp:group -->'
            '<p>x</p><!-- wp:image {"id":2} /-->'
        )
        ids = []
        while processor.next_delimiter("image"):
            ids.append(processor.parse_attributes()["id"])
        assert ids == [1, 2]
