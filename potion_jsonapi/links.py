import rfc3987

from .exceptions import MalformedLink


def _quote_query_brackets(href):
    # brackets are legal in the authority only; servers emit them unencoded in page[...] and fields[...]
    head, separator, query = href.partition('?')
    return head + separator + query.replace('[', '%5B').replace(']', '%5D')


def _origin(url):
    if url is None:
        return None
    try:
        parts = rfc3987.parse(_quote_query_brackets(url), rule='IRI')
    except ValueError:
        return None
    if not parts['scheme'] or parts['authority'] is None:
        return None
    return '{}://{}/'.format(parts['scheme'], parts['authority'])


class Link(object):
    """
    A `link <https://jsonapi.org/format/1.0/#document-links>`_ with an absolute URL and optional meta data.

    Relative hrefs are resolved against the origin of the document the link was found in.

    :param raw_data: either a string or a link object with ``href`` and optional ``meta`` members
    :param str referring_document_url: URL of the document containing the link
    :raises MalformedLink: if the href is neither absolute nor resolvable against the referring document
    """

    def __init__(self, raw_data, referring_document_url=None):
        if isinstance(raw_data, dict):
            href = raw_data.get('href')
            self.meta = raw_data.get('meta')
        else:
            href = raw_data
            self.meta = None

        if not isinstance(href, str):
            raise MalformedLink(href, 'href must be a string')

        href = _quote_query_brackets(href)
        try:
            parts = rfc3987.parse(href, rule='IRI_reference')
        except ValueError:
            raise MalformedLink(href, 'not a valid IRI reference')

        if parts['scheme']:
            self.url = href
            return

        origin = _origin(referring_document_url)
        if origin is None:
            raise MalformedLink(href, 'relative link without a referring document URL')
        self.url = rfc3987.resolve(origin, href)

    def __eq__(self, other):
        return isinstance(other, Link) and self.url == other.url and self.meta == other.meta

    def __repr__(self):
        return "<Link '{}'>".format(self.url)


def links_from(raw_links, referring_document_url=None):
    """
    Build a mapping from link name to :class:`Link`. Links with a ``null`` value are left out.
    """
    return {
        name: Link(raw_link, referring_document_url)
        for name, raw_link in (raw_links or {}).items()
        if raw_link is not None
    }
