"""
JSON-schemas for the parts of a JSON:API 1.0 document a client reads.

See https://jsonapi.org/format/1.0/ for the shapes described here.
"""
from jsonschema import Draft4Validator, FormatChecker
from werkzeug.utils import cached_property

from .exceptions import SchemaError

DEFINITIONS = {
    "meta": {
        "type": "object"
    },
    "link": {
        "oneOf": [
            {"type": "string"},
            {
                "type": "object",
                "properties": {
                    "href": {"type": "string"},
                    "meta": {"$ref": "#/definitions/meta"}
                },
                "required": ["href"]
            },
            {"type": "null"}
        ]
    },
    "links": {
        "type": "object",
        "additionalProperties": {"$ref": "#/definitions/link"}
    },
    "resourceIdentifier": {
        "type": "object",
        "properties": {
            "type": {"type": "string"},
            "id": {"type": "string"},
            "meta": {"$ref": "#/definitions/meta"}
        },
        "required": ["type", "id"]
    },
    "relationship": {
        "type": "object",
        "properties": {
            "links": {"$ref": "#/definitions/links"},
            "data": {
                "oneOf": [
                    {"type": "null"},
                    {"$ref": "#/definitions/resourceIdentifier"},
                    {
                        "type": "array",
                        "items": {"$ref": "#/definitions/resourceIdentifier"}
                    }
                ]
            },
            "meta": {"$ref": "#/definitions/meta"}
        },
        "anyOf": [
            {"required": ["data"]},
            {"required": ["links"]},
            {"required": ["meta"]}
        ]
    },
    "resource": {
        "type": "object",
        "properties": {
            "type": {"type": "string"},
            "id": {"type": "string"},
            "attributes": {"type": "object"},
            "relationships": {
                "type": "object",
                "additionalProperties": {"$ref": "#/definitions/relationship"}
            },
            "links": {"$ref": "#/definitions/links"},
            "meta": {"$ref": "#/definitions/meta"}
        },
        "required": ["type", "id"]
    },
    "document": {
        "type": "object",
        "properties": {
            "data": {
                "oneOf": [
                    {"type": "null"},
                    {"$ref": "#/definitions/resource"},
                    {
                        "type": "array",
                        "items": {"$ref": "#/definitions/resource"}
                    }
                ]
            },
            "included": {
                "type": "array",
                "items": {"$ref": "#/definitions/resource"}
            },
            "errors": {
                "type": "array",
                "items": {"type": "object"}
            },
            "links": {"$ref": "#/definitions/links"},
            "meta": {"$ref": "#/definitions/meta"},
            "jsonapi": {"type": "object"}
        },
        "anyOf": [
            {"required": ["data"]},
            {"required": ["errors"]},
            {"required": ["meta"]}
        ],
        "not": {"required": ["data", "errors"]}
    }
}


class Schema(object):
    """
    Validates raw JSON data against the JSON-schema returned by :meth:`schema`.

    :param str root: name of the checked structure; used in error messages and paths
    """

    def __init__(self, root):
        self.root = root

    def schema(self):
        return {
            "$ref": "#/definitions/{}".format(self.root),
            "definitions": DEFINITIONS
        }

    @cached_property
    def _validator(self):
        schema = self.schema()
        Draft4Validator.check_schema(schema)
        return Draft4Validator(schema, format_checker=FormatChecker())

    def check(self, instance):
        """
        :raises SchemaError: listing every violation found in ``instance``
        """
        errors = list(self._validator.iter_errors(instance))
        if errors:
            raise SchemaError('Raw data does not look like a JSON:API {} object'.format(self.root),
                              errors=errors,
                              root=self.root)
        return instance


document_schema = Schema('document')

resource_object_schema = Schema('resource')

relationship_object_schema = Schema('relationship')


def check_document_schema(raw_data):
    return document_schema.check(raw_data)


def check_resource_object_schema(raw_data):
    return resource_object_schema.check(raw_data)


def check_relationship_object_schema(raw_data):
    return relationship_object_schema.check(raw_data)
