from marshmallow import Schema, fields, validate

from models.schemas.common import DocumentSchema


class CommentInputSchema(DocumentSchema):
    name = fields.String(required=True, validate=validate.Length(min=1))
    email = fields.Email(required=True)
    text = fields.String(required=True, validate=validate.Length(min=1))


class CommentOutSchema(Schema):
    id = fields.String()
    movie_id = fields.String()
    name = fields.String()
    email = fields.String()
    text = fields.String()
    date = fields.DateTime()
