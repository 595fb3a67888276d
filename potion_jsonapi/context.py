import asyncio
import logging
from functools import partial

import requests

JSONAPI_MEDIA_TYPE = 'application/vnd.api+json'

logger = logging.getLogger(__name__)


class Context(object):
    """
    Defines how the raw data of a :class:`Document` is fetched, e.g. from a remote server via HTTP.

    Subclasses implement :meth:`get_document`. Any error it raises reaches the caller of
    :meth:`Document.from_url` or :meth:`Relationship.related_document` unchanged.
    """

    async def get_document(self, url):
        """
        Abstract coroutine returning the raw JSON:API document found at ``url``.

        :param str url: absolute URL
        """
        raise NotImplementedError()


class RequestsContext(Context):
    """
    A :class:`Context` fetching documents with :mod:`requests`. The blocking request runs in the event loop's
    default executor.

    :param session: optional :class:`requests.Session`; a new session is created if omitted
    :param dict headers: extra request headers, e.g. for authorization
    :param timeout: passed on to :meth:`requests.Session.get`
    """

    def __init__(self, session=None, headers=None, timeout=None):
        self.session = session or requests.Session()
        self.headers = {'Accept': JSONAPI_MEDIA_TYPE}
        self.headers.update(headers or {})
        self.timeout = timeout

    def _get(self, url):
        response = self.session.get(url, headers=self.headers, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    async def get_document(self, url):
        logger.debug('GET %s', url)
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(self._get, url))
