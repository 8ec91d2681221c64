from __future__ import annotations

from flask import Blueprint, request, abort
from sqlalchemy import func

from api.responses import success
from api.utils.params import parse_pagination, require_id
from models import storage
from models.theater import Theater
from models.schemas.theater import TheaterInputSchema, TheaterOutSchema

bp = Blueprint("theaters", __name__)

theater_input_schema = TheaterInputSchema()
theater_out_schema = TheaterOutSchema()
theaters_out_schema = TheaterOutSchema(many=True)


def get_theater_or_404(theater_id: str) -> Theater:
    require_id(theater_id, "theater")
    theater = storage.get(Theater, theater_id)
    if not theater:
        abort(404, description="Theater not found")
    return theater


def next_theater_number() -> int:
    session = storage.get_session()
    current = session.query(func.max(Theater.theater_id)).scalar()
    return (current or 0) + 1


@bp.get("/theaters")
def list_theaters():
    """
    List theaters ordered by theaterId
    ---
    tags:
      - Theaters
    parameters:
      - in: query
        name: page
        type: integer
        default: 1
      - in: query
        name: limit
        type: integer
        default: 20
    responses:
      200:
        description: List of theaters
    """
    session = storage.get_session()
    page, limit = parse_pagination()
    query = session.query(Theater)
    total = query.count()
    rows = query.order_by(Theater.theater_id.asc()).offset((page - 1) * limit).limit(limit).all()
    return success(
        200,
        data=theaters_out_schema.dump(rows),
        meta={"page": page, "limit": limit, "total": total},
    )


@bp.post("/theaters")
def create_theater():
    """
    Add a new theater; theaterId is assigned automatically
    ---
    tags:
      - Theaters
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [location]
          properties:
            location:
              type: object
              properties:
                address:
                  type: object
                  properties:
                    street1: { type: string, example: "123 Rue des Lilas" }
                    city: { type: string, example: "Paris" }
                    state: { type: string, example: "Ile-de-France" }
                    zipcode: { type: string, example: "75000" }
                geo:
                  type: object
                  properties:
                    type: { type: string, enum: [Point] }
                    coordinates:
                      type: array
                      items: { type: number }
                      example: [2.3522, 48.8566]
    responses:
      201:
        description: Theater added
      400:
        description: Invalid input
    """
    data = theater_input_schema.load(request.get_json(silent=True) or {})
    theater = Theater(theater_id=next_theater_number(), location=data["location"])
    storage.new(theater)
    storage.save()
    return success(201, message="Theater added", data=theater_out_schema.dump(theater))


@bp.get("/theaters/<theater_id>")
def get_theater(theater_id: str):
    """
    Get a theater by id
    ---
    tags:
      - Theaters
    parameters:
      - in: path
        name: theater_id
        type: string
        required: true
    responses:
      200:
        description: Theater found
      400:
        description: Invalid theater ID
      404:
        description: Theater not found
    """
    theater = get_theater_or_404(theater_id)
    return success(200, data=theater_out_schema.dump(theater))


@bp.put("/theaters/<theater_id>")
def update_theater(theater_id: str):
    """
    Update a theater's location
    ---
    tags:
      - Theaters
    consumes:
      - application/json
    parameters:
      - in: path
        name: theater_id
        type: string
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [location]
          properties:
            location: { type: object }
    responses:
      200:
        description: Theater updated
      400:
        description: Invalid input or theater ID
      404:
        description: Theater not found
    """
    theater = get_theater_or_404(theater_id)
    data = theater_input_schema.load(request.get_json(silent=True) or {})
    theater.location = data["location"]
    storage.new(theater)
    storage.save()
    return success(200, message="Theater updated", data=theater_out_schema.dump(theater))


@bp.delete("/theaters/<theater_id>")
def delete_theater(theater_id: str):
    """
    Delete a theater
    ---
    tags:
      - Theaters
    parameters:
      - in: path
        name: theater_id
        type: string
        required: true
    responses:
      200:
        description: Theater deleted
      400:
        description: Invalid theater ID
      404:
        description: Theater not found
    """
    theater = get_theater_or_404(theater_id)
    storage.delete(theater)
    storage.save()
    return success(200, message="Theater deleted")
