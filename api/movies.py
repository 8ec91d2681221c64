from __future__ import annotations

from flask import Blueprint, request, abort

from api.responses import success
from api.utils.params import parse_pagination, parse_sort, require_id
from models import storage
from models.movie import Movie
from models.schemas.movie import MovieInputSchema, MovieOutSchema

bp = Blueprint("movies", __name__)

movie_input_schema = MovieInputSchema()
movie_out_schema = MovieOutSchema()
movies_out_schema = MovieOutSchema(many=True)

# Sorting allowlist: API field -> SQLAlchemy column
SORT_COLUMNS = {
    "title": Movie.title,
    "year": Movie.year,
    "released": Movie.released,
    "runtime": Movie.runtime,
}


def get_movie_or_404(movie_id: str) -> Movie:
    require_id(movie_id, "movie")
    movie = storage.get(Movie, movie_id)
    if not movie:
        abort(404, description="Movie not found")
    return movie


@bp.get("/movies")
def list_movies():
    """
    List movies with pagination, sorting and title search
    ---
    tags:
      - Movies
    parameters:
      - in: query
        name: page
        type: integer
        default: 1
      - in: query
        name: limit
        type: integer
        default: 20
      - in: query
        name: sort
        type: string
        default: title
        description: "Comma-separated fields; prefix with '-' for desc. Allowed: title, year, released, runtime"
      - in: query
        name: q
        type: string
        description: "Case-insensitive substring search on title"
    responses:
      200:
        description: List of movies
    """
    session = storage.get_session()
    page, limit = parse_pagination()
    order_by = parse_sort(SORT_COLUMNS, "title")

    query = session.query(Movie)
    q = request.args.get("q")
    if q:
        query = query.filter(Movie.title.icontains(q.strip(), autoescape=True))

    total = query.count()
    rows = query.order_by(*order_by).offset((page - 1) * limit).limit(limit).all()
    return success(
        200,
        data=movies_out_schema.dump(rows),
        meta={"page": page, "limit": limit, "total": total},
    )


@bp.post("/movies")
def create_movie():
    """
    Create a new movie
    ---
    tags:
      - Movies
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [title, plot, genres, runtime, cast, poster, fullplot, languages,
                     released, directors, rated, year, imdb, countries, type, tomatoes]
          properties:
            title: { type: string, example: "Inception" }
            plot: { type: string }
            genres: { type: array, items: { type: string } }
            runtime: { type: integer, example: 148 }
            cast: { type: array, items: { type: string } }
            poster: { type: string }
            fullplot: { type: string }
            languages: { type: array, items: { type: string } }
            released: { type: string, format: date-time, example: "2010-07-16T00:00:00.000Z" }
            directors: { type: array, items: { type: string } }
            writers: { type: array, items: { type: string } }
            rated: { type: string, example: "PG-13" }
            awards:
              type: object
              properties:
                wins: { type: integer }
                nominations: { type: integer }
                text: { type: string }
            lastupdated: { type: string }
            year: { type: integer, example: 2010 }
            imdb:
              type: object
              properties:
                rating: { type: number }
                votes: { type: integer }
                id: { type: integer }
            countries: { type: array, items: { type: string } }
            type: { type: string, example: "movie" }
            tomatoes: { type: object }
            num_mflix_comments: { type: integer }
    responses:
      201:
        description: Movie created
      400:
        description: Invalid input
    """
    data = movie_input_schema.load(request.get_json(silent=True) or {})
    movie = Movie(**data)
    storage.new(movie)
    storage.save()
    return success(201, message="Movie created", data=movie_out_schema.dump(movie))


@bp.get("/movies/<movie_id>")
def get_movie(movie_id: str):
    """
    Get a movie by id
    ---
    tags:
      - Movies
    parameters:
      - in: path
        name: movie_id
        type: string
        required: true
    responses:
      200:
        description: Movie found
      400:
        description: Invalid movie ID
      404:
        description: Movie not found
    """
    movie = get_movie_or_404(movie_id)
    return success(200, data=movie_out_schema.dump(movie))


@bp.put("/movies/<movie_id>")
def update_movie(movie_id: str):
    """
    Replace a movie (full document, same validation as create)
    ---
    tags:
      - Movies
    consumes:
      - application/json
    parameters:
      - in: path
        name: movie_id
        type: string
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
    responses:
      200:
        description: Movie updated
      400:
        description: Invalid input or movie ID
      404:
        description: Movie not found
    """
    movie = get_movie_or_404(movie_id)
    data = movie_input_schema.load(request.get_json(silent=True) or {})
    for field, value in data.items():
        setattr(movie, field, value)
    storage.new(movie)
    storage.save()
    return success(200, message="Movie updated", data=movie_out_schema.dump(movie))


@bp.delete("/movies/<movie_id>")
def delete_movie(movie_id: str):
    """
    Delete a movie and its comments
    ---
    tags:
      - Movies
    parameters:
      - in: path
        name: movie_id
        type: string
        required: true
    responses:
      200:
        description: Movie deleted
      400:
        description: Invalid movie ID
      404:
        description: Movie not found
    """
    movie = get_movie_or_404(movie_id)
    storage.delete(movie)
    storage.save()
    return success(200, message="Movie deleted")
