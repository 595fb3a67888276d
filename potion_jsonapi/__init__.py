from .context import Context, RequestsContext, JSONAPI_MEDIA_TYPE
from .document import Document
from .exceptions import (JsonApiError, CardinalityError, IdMismatchError, ResourceNotFound, DuplicateResource,
                         SchemaError, MalformedLink)
from .links import Link
from .relationship import Relationship
from .resource import Resource, PrimaryResource, RelatedResource

__all__ = (
    'Context',
    'RequestsContext',
    'JSONAPI_MEDIA_TYPE',
    'Document',
    'Resource',
    'PrimaryResource',
    'RelatedResource',
    'Relationship',
    'Link',
    'JsonApiError',
    'CardinalityError',
    'IdMismatchError',
    'ResourceNotFound',
    'DuplicateResource',
    'SchemaError',
    'MalformedLink',
    'schema',
    'signals',
)
