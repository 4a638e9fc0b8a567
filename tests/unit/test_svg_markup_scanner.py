import unittest
from svg_markup_scanner import (
    apply_edits,
    find_block_end,
    iter_tags,
    parse_attributes
)


class TestSvgMarkupScanner(unittest.TestCase):

    def test_iter_tags_kinds(self):
        """Test that start, end and self-closing tags are recognised."""
        text = '<g id="a"><rect width="1"/></g>'
        tags = list(iter_tags(text))

        self.assertEqual([tag.name for tag in tags], ['g', 'rect', 'g'])
        self.assertFalse(tags[0].closing)
        self.assertFalse(tags[0].self_closing)
        self.assertTrue(tags[1].self_closing)
        self.assertTrue(tags[2].closing)

    def test_iter_tags_spans(self):
        """Test that tag spans cover the whole tag."""
        text = 'abc<line x1="1" x2="2" />def'
        tag = next(iter_tags(text))

        self.assertEqual(text[tag.start:tag.end], '<line x1="1" x2="2" />')

    def test_iter_tags_skips_comments(self):
        """Test that tags inside comments are ignored."""
        text = '<!-- <g transform="translate(50, 0)"> --><rect/>'
        tags = list(iter_tags(text))

        self.assertEqual([tag.name for tag in tags], ['rect'])

    def test_iter_tags_multiline_and_quoted_gt(self):
        """Test attributes spanning lines and containing '>' inside quotes."""
        text = '<polygon data-note="a > b" points="1,2\n   3,4"/>'
        tag = next(iter_tags(text))

        self.assertEqual(tag.get('data-note'), 'a > b')
        self.assertEqual(tag.get('points'), '1,2\n   3,4')
        self.assertEqual(tag.end, len(text))

    def test_iter_tags_range(self):
        """Test scanning only part of the text."""
        text = '<a><b></b><c/></a>'
        names = [tag.name for tag in iter_tags(text, 3, 10)]

        self.assertEqual(names, ['b', 'b'])

    def test_parse_attributes_quote_styles(self):
        """Test double, single, bare and valueless attributes."""
        source = ' a="1" b=\'2\' c=3 d'
        attributes = parse_attributes(source)

        self.assertEqual([(attr.name, attr.value) for attr in attributes],
                         [('a', '1'), ('b', '2'), ('c', '3'), ('d', '')])

    def test_parse_attributes_offsets(self):
        """Test that value spans are absolute positions in the document."""
        text = '<text x="120" y="5">'
        tag = next(iter_tags(text))
        x = tag.attribute('x')

        self.assertEqual(text[x.value_start:x.value_end], '120')
        self.assertEqual(text[:x.end], '<text x="120"')

    def test_attribute_missing(self):
        """Test looking up an attribute that is not present."""
        tag = next(iter_tags('<g id="x">'))

        self.assertIsNone(tag.attribute('transform'))
        self.assertEqual(tag.get('transform', 'none'), 'none')

    def test_find_block_end_nested(self):
        """Test that nested groups do not end the outer group early."""
        text = '<g id="outer"><g><rect/></g><g/><line/></g>tail'
        open_tag = next(iter_tags(text))

        end = find_block_end(text, open_tag)
        self.assertEqual(text[end:], 'tail')

    def test_find_block_end_self_closing(self):
        """Test that a self-closing group ends at its own tag."""
        text = '<g transform="translate(1, 2)"/><g></g>'
        open_tag = next(iter_tags(text))

        self.assertEqual(find_block_end(text, open_tag), open_tag.end)

    def test_find_block_end_unclosed(self):
        """Test that an unclosed group is reported as None."""
        text = '<g><rect/>'
        open_tag = next(iter_tags(text))

        self.assertIsNone(find_block_end(text, open_tag))

    def test_apply_edits(self):
        """Test replacements and insertions in any order."""
        text = 'abcdef'
        edits = [(4, 5, 'E'), (0, 1, 'A'), (2, 2, '-')]

        self.assertEqual(apply_edits(text, edits), 'Ab-cdEf')

    def test_apply_edits_empty(self):
        """Test that no edits leaves the text unchanged."""
        self.assertEqual(apply_edits('abc', []), 'abc')


if __name__ == '__main__':
    unittest.main()
