import logging

from werkzeug.utils import cached_property

from .exceptions import CardinalityError, SchemaError
from .links import links_from
from .schema import check_relationship_object_schema
from .utils import memoized_coroutine

logger = logging.getLogger(__name__)


class Relationship(object):
    """
    A `relationship object <https://jsonapi.org/format/1.0/#document-resource-object-relationships>`_. Resolves to
    resources included in the referring document, or to the document behind its ``related`` link.

    Resolution happens at most once per relationship; repeated calls return the first result.

    :param Document referring_document: the document the relationship was found in
    :param dict raw_data: the raw relationship object
    :raises SchemaError: if ``raw_data`` does not look like a JSON:API relationship object
    """

    def __init__(self, referring_document, raw_data):
        check_relationship_object_schema(raw_data)
        self.referring_document = referring_document
        self.raw_data = raw_data

    @cached_property
    def data(self):
        """
        The resource identifier object(s) under ``data``
        """
        return self.raw_data.get('data')

    @cached_property
    def links(self):
        """
        Mapping from link name to :class:`Link`, or ``None`` if there is no ``links`` member
        """
        if self.raw_data.get('links') is None:
            return None
        return links_from(self.raw_data['links'], self.referring_document.url)

    @cached_property
    def empty(self):
        """``True`` if there is neither a ``data`` nor a ``links`` member, e.g. when only ``meta`` is present"""
        return self.links is None and 'data' not in self.raw_data

    def _related_resource(self, resource_identifier):
        from .resource import RelatedResource
        return RelatedResource(self.referring_document, resource_identifier['id'], resource_identifier['type'])

    @memoized_coroutine
    async def related_document(self):
        """
        The :class:`Document` behind the ``related`` link, or ``None`` if there is no such link.
        """
        if self.links and 'related' in self.links:
            from .document import Document
            return await Document.from_url(self.links['related'].url,
                                           self.referring_document.context,
                                           self.referring_document.sparse_fields)
        return None

    @memoized_coroutine
    async def resources(self):
        """
        List of the resources this relationship refers to.

        :raises CardinalityError: if the relationship refers to a single resource
        :raises SchemaError: if neither ``data`` nor a ``related`` link is present
        """
        if 'data' in self.raw_data:
            resource_identifiers = self.data
            if resource_identifiers is None:
                return []
            if not isinstance(resource_identifiers, list):
                raise CardinalityError('Relationship does not contain an array of resources. '
                                       'Use the `resource` method instead.')
            logger.debug('Resolving %d resources from relationship data', len(resource_identifiers))
            return [self._related_resource(rid) for rid in resource_identifiers]

        related_document = await self.related_document()
        if related_document is not None:
            return related_document.resources
        raise SchemaError('A relationship object relating to a resource must contain a `links` or `data` member',
                          root='relationship')

    @memoized_coroutine
    async def resource(self):
        """
        The one resource this relationship refers to, or ``None`` for empty to-one relationships.

        :raises CardinalityError: if the relationship refers to an array of resources
        :raises SchemaError: if neither ``data`` nor a ``related`` link is present
        """
        if 'data' in self.raw_data:
            resource_identifier = self.data
            if isinstance(resource_identifier, list):
                raise CardinalityError('Relationship contains more than one resource. '
                                       'Use the `resources` method instead.')
            if resource_identifier is None:
                return None
            return self._related_resource(resource_identifier)

        related_document = await self.related_document()
        if related_document is not None:
            return related_document.resource
        raise SchemaError('A relationship object relating to a resource must contain a `links` or `data` member',
                          root='relationship')
