from marshmallow import Schema, fields, validate, validates, ValidationError

from models.schemas.common import DocumentSchema

MIN_PASSWORD_LENGTH = 9


# Emails are kept exactly as typed: no trimming, no lower-casing.
class UserCreateSchema(DocumentSchema):
    name = fields.String(required=True, validate=validate.Length(min=1))
    email = fields.Email(required=True, error_messages={"invalid": "Invalid email address."})
    password = fields.String(required=True, load_only=True)

    @validates("password")
    def validate_password(self, value, **kwargs):
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long."
            )


class UserLoginSchema(DocumentSchema):
    email = fields.Email(required=True, error_messages={"invalid": "Invalid email address."})
    password = fields.String(
        required=True,
        load_only=True,
        validate=validate.Length(min=1, error="Password is required."),
    )


class UserOutSchema(Schema):
    id = fields.String()
    name = fields.String()
    email = fields.String()
    created_at = fields.DateTime()
    updated_at = fields.DateTime()


class UserPublicSchema(Schema):
    name = fields.String()
    email = fields.String()
