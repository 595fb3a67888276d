class JsonApiError(Exception):
    pass


class CardinalityError(JsonApiError):
    """
    Raised when a one-valued accessor is used on many-valued data or vice versa.
    """


class IdMismatchError(JsonApiError):
    """
    Raised when a resource reference cannot be resolved to exactly one resource object.
    """


class ResourceNotFound(IdMismatchError):

    def __init__(self, type, id):
        super(ResourceNotFound, self).__init__(
            'Resource with id "{}" and type "{}" not found in document'.format(id, type))
        self.type = type
        self.id = id


class DuplicateResource(IdMismatchError):

    def __init__(self, type, id, count):
        super(DuplicateResource, self).__init__(
            'Resource with id "{}" and type "{}" found {} times in document'.format(id, type, count))
        self.type = type
        self.id = id
        self.count = count


class SchemaError(JsonApiError):
    """
    Raised when raw data does not look like a JSON:API structure.

    :param str message: summary of the defect
    :param errors: optional iterable of :class:`jsonschema.ValidationError`
    :param str root: name of the structure that was checked, prepended to every error path
    """

    def __init__(self, message, errors=None, root=None):
        super(SchemaError, self).__init__(message)
        self.message = message
        self.errors = list(errors or ())
        self.root = root

    def _complete_path(self, error):
        path = tuple(error.absolute_path)
        if self.root is not None:
            return (self.root,) + path
        return path

    def _format_errors(self):
        for error in self.errors:
            yield {
                'validationOf': {error.validator: error.validator_value},
                'path': self._complete_path(error),
                'message': error.message
            }

    def as_dict(self):
        return {
            'message': self.message,
            'errors': list(self._format_errors())
        }


class MalformedLink(SchemaError):

    def __init__(self, href, reason=None):
        message = 'Malformed link "{}"'.format(href)
        if reason:
            message = '{}: {}'.format(message, reason)
        super(MalformedLink, self).__init__(message, root='link')
        self.href = href
