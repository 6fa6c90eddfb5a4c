"""
tooth.json manifest validation

The schema is compiled once, when this module is first imported, and the
compiled validator is shared read-only by every caller afterwards.
"""
import copy

from jsonschema import Draft202012Validator

SEMVER_PATTERN = r'^\d+\.\d+\.\d+(-[0-9A-Za-z.-]+)?(\+[0-9A-Za-z.-]+)?$'

# Column sizes of the catalog rows a manifest is stored in
MAX_VERSION_LENGTH = 100
MAX_NAME_LENGTH = 255
MAX_AUTHOR_LENGTH = 255
MAX_TAG_LENGTH = 100
MAX_AVATAR_URL_LENGTH = 500

JSON_SCHEMA = {
    '$schema': 'https://json-schema.org/draft/2020-12/schema',
    'type': 'object',
    'required': ['tooth', 'version', 'info'],
    'properties': {
        'tooth': {'type': 'string'},
        'version': {
            'type': 'string',
            'pattern': SEMVER_PATTERN,
            'maxLength': MAX_VERSION_LENGTH,
        },
        'info': {
            'type': 'object',
            'required': ['name', 'description', 'author', 'tags'],
            'properties': {
                'name': {'type': 'string', 'maxLength': MAX_NAME_LENGTH},
                'description': {'type': 'string'},
                'author': {'type': 'string', 'maxLength': MAX_AUTHOR_LENGTH},
                'tags': {
                    'type': 'array',
                    'items': {'type': 'string', 'maxLength': MAX_TAG_LENGTH},
                },
                'avatar_url': {'type': 'string', 'maxLength': MAX_AVATAR_URL_LENGTH},
            },
        },
    },
}

Draft202012Validator.check_schema(JSON_SCHEMA)
_VALIDATOR = Draft202012Validator(JSON_SCHEMA)


class ManifestValidationError(Exception):
    """Raised when a manifest does not conform to the tooth.json schema."""

    def __init__(self, message, errors=()):
        super().__init__(message)
        self.errors = list(errors)


def schema_errors(raw):
    """
    Collect every schema violation in raw.

    Returns a list of "<json path>: <message>" strings, sorted so the same
    document always yields the same list. Empty means valid.
    """
    errors = sorted(_VALIDATOR.iter_errors(raw), key=lambda e: (e.json_path, e.message))
    return [f"{error.json_path}: {error.message}" for error in errors]


class Manifest:
    """
    Read-only view over a validated tooth.json document.

    The document is copied on construction, so later changes to the caller's
    dict never show through.
    """

    def __init__(self, raw):
        errors = schema_errors(raw)
        if errors:
            raise ManifestValidationError(
                f"tooth.json is invalid: {'; '.join(errors)}", errors)
        self._raw = copy.deepcopy(raw)

    def __repr__(self):
        return f"Manifest({self.tooth_repo_path!r}, {self.version!r})"

    @property
    def tooth_repo_path(self):
        return self._raw['tooth']

    @property
    def version(self):
        return self._raw['version']

    @property
    def name(self):
        return self._raw['info']['name']

    @property
    def description(self):
        return self._raw['info']['description']

    @property
    def author(self):
        return self._raw['info']['author']

    @property
    def tags(self):
        return list(self._raw['info']['tags'])

    @property
    def avatar_url(self):
        return self._raw['info'].get('avatar_url') or None


def validate_manifest(raw):
    """Validate raw and return its Manifest view, or raise ManifestValidationError."""
    return Manifest(raw)
