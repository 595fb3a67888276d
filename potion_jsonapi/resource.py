import logging

from werkzeug.utils import cached_property

from .exceptions import IdMismatchError, ResourceNotFound, DuplicateResource
from .links import links_from
from .relationship import Relationship
from .schema import check_resource_object_schema

logger = logging.getLogger(__name__)


class RelationAccessor(object):
    """
    Read-only lookup of resolved relationships by name. ``accessor[name]`` returns an awaitable.
    """

    def __init__(self, resource):
        self.resource = resource

    async def get(self, name):
        raise NotImplementedError()

    def __getitem__(self, name):
        return self.get(name)

    def __contains__(self, name):
        return name in self.resource.relationships

    def __iter__(self):
        return iter(self.resource.relationships)

    def __len__(self):
        return len(self.resource.relationships)


class RelatedResourceAccessor(RelationAccessor):

    async def get(self, name):
        return await self.resource.get_related(name)


class RelatedResourcesAccessor(RelationAccessor):

    async def get(self, name):
        return await self.resource.get_related_many(name)


class RelatedDocumentAccessor(RelationAccessor):

    async def get(self, name):
        return await self.resource.get_related_document(name)


class Resource(object):
    """
    A JSON:API `resource object <https://jsonapi.org/format/1.0/#document-resource-objects>`_.

    Subclasses decide where the raw data comes from by implementing :meth:`_get_data`. Everything derived from it
    is computed on first access and kept for the lifetime of the resource.

    :param Document document: the document this resource was found in
    :param str id:
    :param str type:
    """

    def __init__(self, document, id, type):
        self.document = document
        self.id = id
        self.type = type

    def _get_data(self):
        raise NotImplementedError()

    @cached_property
    def raw_data(self):
        return self._get_data()

    @property
    def attributes(self):
        return self.raw_data.get('attributes')

    @property
    def meta(self):
        return self.raw_data.get('meta')

    @cached_property
    def relationships(self):
        """
        Mapping from relationship name to :class:`Relationship`
        """
        return {
            name: Relationship(self.document, raw_relationship)
            for name, raw_relationship in self.raw_data.get('relationships', {}).items()
        }

    @cached_property
    def links(self):
        return links_from(self.raw_data.get('links'), self.document.url)

    @cached_property
    def meta_links(self):
        """
        Mapping of the entries in ``links`` of ``meta``, each interpreted as a :class:`Link`
        """
        meta_links = (self.meta or {}).get('links')
        if not isinstance(meta_links, dict):
            return {}
        return links_from(meta_links, self.document.url)

    @property
    def self_link(self):
        return self.links.get('self')

    async def get_related(self, name):
        """
        The one resource reached through relationship ``name``, or ``None`` if there is no such relationship.
        """
        if name in self.relationships:
            return await self.relationships[name].resource()
        return None

    async def get_related_many(self, name):
        """
        The resources reached through relationship ``name``; empty if there is no such relationship.
        """
        if name in self.relationships:
            return await self.relationships[name].resources()
        return []

    async def get_related_document(self, name):
        """
        The document behind the ``related`` link of relationship ``name``, or ``None``.
        """
        if name in self.relationships:
            return await self.relationships[name].related_document()
        return None

    @property
    def related_resource(self):
        return RelatedResourceAccessor(self)

    @property
    def related_resources(self):
        return RelatedResourcesAccessor(self)

    @property
    def related_documents(self):
        return RelatedDocumentAccessor(self)

    def __repr__(self):
        return "<{} type='{}' id='{}'>".format(self.__class__.__name__, self.type, self.id)


class PrimaryResource(Resource):
    """
    A resource from the top level ``data`` member of a :class:`Document`, bound to its raw data on construction.

    :param dict raw_data: the raw resource object
    :param Document document:
    :param str id: optional; must match the id in ``raw_data``
    :raises SchemaError: if ``raw_data`` does not look like a JSON:API resource object
    :raises IdMismatchError: if ``id`` does not match the id in ``raw_data``
    """

    def __init__(self, raw_data, document, id=None):
        check_resource_object_schema(raw_data)
        if id is not None and id != raw_data['id']:
            raise IdMismatchError('ID in raw data does not match given ID: {} != {}'.format(raw_data['id'], id))
        super(PrimaryResource, self).__init__(document, raw_data['id'], raw_data['type'])
        self._raw_data = raw_data

    def _get_data(self):
        return self._raw_data


class RelatedResource(Resource):
    """
    A reference by type and id to a resource in the primary data or under ``included`` of a :class:`Document`.

    Construction never fails; the resource object is looked up when its data is first needed.
    """

    def _get_data(self):
        """
        :raises ResourceNotFound: if no resource object with this type and id is in the document
        :raises DuplicateResource: if there is more than one
        :raises SchemaError: if the matching resource object does not look like a JSON:API resource object
        """
        raw_document = self.document.raw_data
        primary_data = raw_document.get('data')
        if primary_data is None:
            primary_data = []
        elif not isinstance(primary_data, list):
            primary_data = [primary_data]

        candidates = primary_data + raw_document.get('included', [])
        matches = [resource_object for resource_object in candidates
                   if resource_object.get('type') == self.type and resource_object.get('id') == self.id]

        if not matches:
            raise ResourceNotFound(self.type, self.id)
        if len(matches) > 1:
            raise DuplicateResource(self.type, self.id, len(matches))

        logger.debug('Resolved %r in %r', self, self.document)
        return check_resource_object_schema(matches[0])
