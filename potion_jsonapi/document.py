import logging

from werkzeug.utils import cached_property

from .exceptions import CardinalityError
from .links import links_from
from .resource import PrimaryResource, RelatedResource
from .schema import check_document_schema
from .signals import before_fetch, after_fetch
from .utils import with_sparse_fields

logger = logging.getLogger(__name__)


class Document(object):
    """
    Holds an ``application/vnd.api+json`` `document <https://jsonapi.org/format/1.0/#document-top-level>`_ and
    provides access to the resources in it. This is the entry point for traversing to other resources.

    Use :meth:`from_url` to fetch a document; the constructor never touches the network.

    :param dict raw_data: the raw JSON:API document
    :param Context context: used to fetch documents behind ``related`` links
    :param str url: where ``raw_data`` came from; relative links are resolved against its origin
    :param dict sparse_fields: mapping from resource type to field names, propagated to every related fetch
    :raises SchemaError: if ``raw_data`` does not look like a JSON:API document
    """

    def __init__(self, raw_data, context=None, url=None, sparse_fields=None):
        check_document_schema(raw_data)
        self.raw_data = raw_data
        self.context = context
        self.url = url
        self.sparse_fields = sparse_fields

    @classmethod
    async def from_url(cls, url, context, sparse_fields=None):
        """
        Fetch raw data from ``url`` using ``context`` and construct a :class:`Document` from it. If
        ``sparse_fields`` are given, only those fields are requested from the server.
        """
        if context is None:
            raise RuntimeError('Cannot fetch "{}"; the document is not bound to a Context.'.format(url))

        url = with_sparse_fields(url, sparse_fields)
        before_fetch.send(context, url=url)
        logger.debug('Fetching document from %s', url)

        raw_data = await context.get_document(url)
        document = cls(raw_data, context, url, sparse_fields)

        after_fetch.send(context, url=url, document=document)
        return document

    @cached_property
    def has_many_resources(self):
        """``True`` if the primary data is an array of resources"""
        return isinstance(self.raw_data.get('data'), list)

    @cached_property
    def resources(self):
        """
        List of the primary :class:`PrimaryResource` objects, in document order.

        :raises CardinalityError: if the document holds a single resource
        """
        if not self.has_many_resources:
            raise CardinalityError('Document does not contain an array of resources. '
                                   'Use the `resource` property instead')
        return [PrimaryResource(primary_data, self) for primary_data in self.raw_data['data']]

    @cached_property
    def resource(self):
        """
        The primary :class:`PrimaryResource`, or ``None`` if the primary data is ``null``.

        :raises CardinalityError: if the document holds an array of resources
        """
        if self.has_many_resources:
            raise CardinalityError('Document contains an array of resources. '
                                   'Use the `resources` property instead')
        primary_data = self.raw_data.get('data')
        if primary_data is None:
            return None
        return PrimaryResource(primary_data, self)

    @cached_property
    def included_resources(self):
        """
        Mapping from type to id to :class:`RelatedResource` for every resource under ``included``.
        """
        included = {}
        for resource_object in self.raw_data.get('included', ()):
            resource_type, resource_id = resource_object['type'], resource_object['id']
            included.setdefault(resource_type, {})[resource_id] = RelatedResource(self, resource_id, resource_type)
        return included

    @cached_property
    def links(self):
        return links_from(self.raw_data.get('links'), self.url)

    @property
    def meta(self):
        return self.raw_data.get('meta')

    @property
    def errors(self):
        return self.raw_data.get('errors')

    def __repr__(self):
        return "<Document '{}'>".format(self.url)
