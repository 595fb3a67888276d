from unittest import TestCase

from potion_jsonapi.exceptions import MalformedLink, SchemaError
from potion_jsonapi.links import Link, links_from


class LinkTestCase(TestCase):

    def test_relative_link_resolves_against_origin(self):
        self.assertEqual('https://h/x/y', Link('/x/y', 'https://h/p').url)

    def test_relative_link_ignores_referring_path_and_query(self):
        self.assertEqual('https://h:8443/x/y', Link('/x/y', 'https://h:8443/a/b/c?page=2').url)

    def test_absolute_link(self):
        self.assertEqual('https://other/z', Link('https://other/z', 'https://h/p').url)
        self.assertEqual('https://other/z', Link('https://other/z').url)

    def test_link_object(self):
        link = Link({"href": "/people/9", "meta": {"count": 10}}, 'http://example.com/articles')
        self.assertEqual('http://example.com/people/9', link.url)
        self.assertEqual({"count": 10}, link.meta)

    def test_link_string_has_no_meta(self):
        self.assertIsNone(Link('http://example.com/').meta)

    def test_relative_link_without_referring_url(self):
        with self.assertRaises(MalformedLink) as cx:
            Link('/x/y')
        self.assertEqual('/x/y', cx.exception.href)
        self.assertIsInstance(cx.exception, SchemaError)

    def test_malformed_href(self):
        with self.assertRaises(MalformedLink):
            Link('http://exa mple.com/<>', 'https://h/p')

        with self.assertRaises(MalformedLink):
            Link({"href": 42})

    def test_links_from(self):
        links = links_from({
            "self": "/articles",
            "next": {"href": "/articles?page=2"},
            "prev": None
        }, 'http://example.com/articles')

        self.assertEqual(['next', 'self'], sorted(links))
        self.assertEqual('http://example.com/articles', links['self'].url)
        self.assertEqual('http://example.com/articles?page=2', links['next'].url)
        self.assertEqual({}, links_from(None))

    def test_brackets_in_query_are_encoded(self):
        self.assertEqual('http://example.com/articles?page%5Boffset%5D=2',
                         Link('/articles?page[offset]=2', 'http://example.com/articles').url)
        self.assertEqual('http://[::1]:8080/x?fields%5Bpeople%5D=name',
                         Link('http://[::1]:8080/x?fields[people]=name').url)
