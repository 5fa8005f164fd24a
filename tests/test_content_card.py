"""
Tests for the content card and the ContentItem it displays.
"""

from types import SimpleNamespace

import pytest

from components import ContentItem, content_card


def heading_and_body(soup, markup):
    parsed = soup(markup)
    return parsed.find('h4').find('b').get_text(), parsed.find('p').get_text()


# =============================================================================
# Rendering
# =============================================================================

class TestContentCard:
    """Tests for content_card."""

    @pytest.mark.parametrize('title,description', [
        ('Hello', 'World'),
        ('', ''),
        ('  padded  ', 'two\nlines'),
        ('<script>alert(1)</script>', 'Fish & Chips "quoted"'),
        ('Café ☕', 'Ünïcödé – text'),
    ])
    def test_title_and_description_shown_verbatim(self, soup, title, description):
        """Heading shows exactly the title and the paragraph exactly the description."""
        markup = content_card({'title': title, 'description': description})
        assert heading_and_body(soup, markup) == (title, description)

    def test_markup_is_escaped(self):
        markup = content_card({'title': '<b>x</b>', 'description': ''})
        assert '&lt;b&gt;x&lt;/b&gt;' in markup

    def test_structure(self, soup):
        parsed = soup(content_card(ContentItem('T', 'D')))
        outer = parsed.find('div', class_='blogCard')
        assert outer is not None
        inner = outer.find('div', class_='blogContainer')
        assert inner.find('h4').find('b').get_text() == 'T'
        assert inner.find('p').get_text() == 'D'

    def test_same_input_same_output(self):
        item = {'title': 'Repeat', 'description': 'Again'}
        assert content_card(item) == content_card(item)

    def test_empty_description(self, soup):
        markup = content_card({'title': 'Hello', 'description': ''})
        assert heading_and_body(soup, markup) == ('Hello', '')

    def test_missing_fields_render_empty(self, soup):
        assert heading_and_body(soup, content_card({})) == ('', '')

    def test_none_renders_empty(self, soup):
        assert heading_and_body(soup, content_card(None)) == ('', '')

    def test_extra_fields_ignored(self, soup):
        markup = content_card({'title': 'A', 'description': 'B', 'id': 7, 'tags': ['x']})
        assert heading_and_body(soup, markup) == ('A', 'B')
        assert 'tags' not in markup

    def test_object_with_attributes(self, soup):
        markup = content_card(SimpleNamespace(title='From object'))
        assert heading_and_body(soup, markup) == ('From object', '')

    def test_methods_are_not_rendered_as_text(self, soup):
        """A bare string has a title() method; it must not leak into the heading."""
        markup = content_card('abc')
        assert 'built-in method' not in markup
        assert heading_and_body(soup, markup) == ('', '')

    def test_post_model(self, soup, sample_posts):
        markup = content_card(sample_posts[0].to_content_item())
        assert heading_and_body(soup, markup) == (
            'Shipping a Flask site', 'Notes from the first deploy.')


# =============================================================================
# ContentItem
# =============================================================================

class TestContentItem:
    """Tests for ContentItem construction."""

    def test_defaults_are_empty(self):
        assert ContentItem() == ContentItem('', '')

    def test_from_mapping_none_values(self):
        assert ContentItem.from_mapping({'title': None, 'description': None}) == ContentItem()

    def test_from_mapping_non_string_values(self):
        item = ContentItem.from_mapping({'title': 42, 'description': 3.5})
        assert item == ContentItem('42', '3.5')

    def test_coerce_returns_same_instance(self):
        item = ContentItem('a', 'b')
        assert ContentItem.coerce(item) is item

    def test_is_immutable(self):
        item = ContentItem('a', 'b')
        with pytest.raises(AttributeError):
            item.title = 'changed'
