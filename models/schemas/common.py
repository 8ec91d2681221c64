import uuid

from marshmallow import Schema, EXCLUDE


class DocumentSchema(Schema):
    """Base for request schemas: unknown keys are dropped, not rejected."""

    class Meta:
        unknown = EXCLUDE


def is_uuid(value) -> bool:
    if not isinstance(value, str):
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True

