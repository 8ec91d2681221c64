from marshmallow import Schema, fields, validate

from models.schemas.common import DocumentSchema


class AddressSchema(DocumentSchema):
    street1 = fields.String(required=True)
    city = fields.String(required=True)
    state = fields.String(required=True)
    zipcode = fields.String(required=True)


class GeoSchema(DocumentSchema):
    type = fields.String(required=True, validate=validate.OneOf(["Point"]))
    # GeoJSON order: [longitude, latitude]
    coordinates = fields.List(
        fields.Float(),
        required=True,
        validate=validate.Length(equal=2, error="Coordinates must contain exactly two numbers"),
    )


class LocationSchema(DocumentSchema):
    address = fields.Nested(AddressSchema, required=True)
    geo = fields.Nested(GeoSchema, required=True)


class TheaterInputSchema(DocumentSchema):
    location = fields.Nested(LocationSchema, required=True)


class TheaterOutSchema(Schema):
    id = fields.String()
    theaterId = fields.Integer(attribute="theater_id")
    location = fields.Raw()
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
