import asyncio
import copy
from collections import Counter

from potion_jsonapi import Context


class CountingContext(Context):
    """
    Serves canned raw documents by URL and counts every fetch.

    Use ``failures`` to make the first n fetches of a URL raise an error, and ``delay`` to slow down every fetch.
    """

    def __init__(self, documents=None, failures=None, delay=0):
        self.documents = documents or {}
        self.delay = delay
        self.failures = Counter(failures or {})
        self.fetches = []

    async def get_document(self, url):
        self.fetches.append(url)
        await asyncio.sleep(self.delay)
        if self.failures[url] > 0:
            self.failures[url] -= 1
            raise ConnectionError('Could not fetch {}'.format(url))
        try:
            return copy.deepcopy(self.documents[url])
        except KeyError:
            raise LookupError('No document at {}'.format(url))

    def count(self, url=None):
        if url is None:
            return len(self.fetches)
        return self.fetches.count(url)


ARTICLES_URL = 'http://example.com/articles'

ARTICLES_DOCUMENT = {
    "links": {
        "self": "http://example.com/articles",
        "next": "/articles?page[offset]=2",
        "prev": None
    },
    "meta": {"total": 2},
    "data": [
        {
            "type": "articles",
            "id": "1",
            "attributes": {"title": "JSON:API paints my bikeshed!"},
            "links": {"self": "/articles/1"},
            "relationships": {
                "author": {
                    "links": {
                        "self": "/articles/1/relationships/author",
                        "related": "/articles/1/author"
                    },
                    "data": {"type": "people", "id": "9"}
                },
                "comments": {
                    "links": {
                        "self": "/articles/1/relationships/comments",
                        "related": "/articles/1/comments"
                    },
                    "data": [
                        {"type": "comments", "id": "5"},
                        {"type": "comments", "id": "12"}
                    ]
                },
                "tags": {
                    "links": {"related": "http://example.com/articles/1/tags"}
                },
                "publisher": {
                    "links": {"related": "http://example.com/articles/1/publisher"}
                },
                "editor": {
                    "data": None
                },
                "reviews": {
                    "meta": {"count": 0}
                }
            }
        },
        {
            "type": "articles",
            "id": "2",
            "attributes": {"title": "Rails is Omakase"},
            "relationships": {
                "author": {"data": {"type": "people", "id": "404"}}
            }
        }
    ],
    "included": [
        {
            "type": "people",
            "id": "9",
            "attributes": {"firstName": "Dan", "lastName": "Gebhardt", "twitter": "dgeb"},
            "meta": {
                "verified": True,
                "links": {"avatar": {"href": "/people/9/avatar.png", "meta": {"size": 48}}}
            },
            "links": {"self": "http://example.com/people/9"}
        },
        {
            "type": "comments",
            "id": "5",
            "attributes": {"body": "First!"},
            "relationships": {
                "author": {"data": {"type": "people", "id": "2"}}
            }
        },
        {
            "type": "comments",
            "id": "12",
            "attributes": {"body": "I like XML better"},
            "relationships": {
                "author": {"data": {"type": "people", "id": "9"}}
            }
        }
    ]
}

TAGS_DOCUMENT = {
    "data": [
        {"type": "tags", "id": "1", "attributes": {"name": "rest"}},
        {"type": "tags", "id": "2", "attributes": {"name": "hypermedia"}}
    ]
}

AUTHOR_DOCUMENT = {
    "data": {
        "type": "people",
        "id": "9",
        "attributes": {"firstName": "Dan", "lastName": "Gebhardt"}
    }
}

PUBLISHER_DOCUMENT = {
    "data": {
        "type": "publishers",
        "id": "7",
        "attributes": {"name": "Example Press"}
    }
}


def articles_document():
    return copy.deepcopy(ARTICLES_DOCUMENT)


def articles_context():
    return CountingContext({
        ARTICLES_URL: ARTICLES_DOCUMENT,
        'http://example.com/articles/1/tags': TAGS_DOCUMENT,
        'http://example.com/articles/1/author': AUTHOR_DOCUMENT,
        'http://example.com/articles/1/publisher': PUBLISHER_DOCUMENT,
    })
