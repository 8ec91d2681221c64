from marshmallow import Schema, fields, validate

from models.schemas.common import DocumentSchema


class AwardsSchema(DocumentSchema):
    wins = fields.Integer(required=True)
    nominations = fields.Integer(required=True)
    text = fields.String(required=True)


class ImdbSchema(DocumentSchema):
    rating = fields.Float(required=True)
    votes = fields.Integer(required=True)
    id = fields.Integer(required=True)


class TomatoRatingSchema(DocumentSchema):
    rating = fields.Float(required=True)
    numReviews = fields.Integer(required=True)
    meter = fields.Integer(required=True)


class TomatoesSchema(DocumentSchema):
    viewer = fields.Nested(TomatoRatingSchema, required=True)
    fresh = fields.Integer(required=True)
    critic = fields.Nested(TomatoRatingSchema, required=True)
    rotten = fields.Integer(required=True)
    lastUpdated = fields.String(required=True)


class MovieInputSchema(DocumentSchema):
    """Body of POST /movies and PUT /movies/<id> (full document)."""

    title = fields.String(required=True)
    plot = fields.String(required=True)
    genres = fields.List(fields.String(), required=True)
    runtime = fields.Integer(required=True)
    cast = fields.List(fields.String(), required=True)
    poster = fields.String(required=True)
    fullplot = fields.String(required=True)
    languages = fields.List(fields.String(), required=True)
    released = fields.DateTime(required=True)
    directors = fields.List(fields.String(), required=True)
    writers = fields.List(fields.String())
    rated = fields.String(required=True)
    awards = fields.Nested(AwardsSchema)
    lastupdated = fields.String()
    year = fields.Integer(required=True, validate=validate.Range(min=1800, max=3000))
    imdb = fields.Nested(ImdbSchema, required=True)
    countries = fields.List(fields.String(), required=True)
    type = fields.String(required=True)
    tomatoes = fields.Nested(TomatoesSchema, required=True)
    num_mflix_comments = fields.Integer(validate=validate.Range(min=0))


class MovieOutSchema(Schema):
    id = fields.String()
    title = fields.String(allow_none=True)
    plot = fields.String(allow_none=True)
    genres = fields.List(fields.String())
    runtime = fields.Integer(allow_none=True)
    cast = fields.List(fields.String())
    poster = fields.String(allow_none=True)
    fullplot = fields.String(allow_none=True)
    languages = fields.List(fields.String())
    released = fields.DateTime(allow_none=True)
    directors = fields.List(fields.String())
    writers = fields.List(fields.String())
    rated = fields.String(allow_none=True)
    awards = fields.Raw(allow_none=True)
    lastupdated = fields.String(allow_none=True)
    year = fields.Integer(allow_none=True)
    imdb = fields.Raw(allow_none=True)
    countries = fields.List(fields.String())
    type = fields.String(allow_none=True)
    tomatoes = fields.Raw(allow_none=True)
    num_mflix_comments = fields.Integer(allow_none=True)
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
