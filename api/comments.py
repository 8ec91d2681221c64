from __future__ import annotations

from flask import Blueprint, request, abort

from api.movies import get_movie_or_404
from api.responses import success
from api.utils.params import require_id
from models import storage
from models.comment import Comment
from models.schemas.comment import CommentInputSchema, CommentOutSchema

bp = Blueprint("comments", __name__)

comment_input_schema = CommentInputSchema()
comment_out_schema = CommentOutSchema()
comments_out_schema = CommentOutSchema(many=True)


def get_comment_or_404(movie_id: str, comment_id: str) -> Comment:
    # A comment is only reachable under the movie it belongs to
    require_id(movie_id, "movie")
    require_id(comment_id, "comment")
    comment = storage.find_one(Comment, id=comment_id, movie_id=movie_id)
    if not comment:
        abort(404, description="Comment not found")
    return comment


@bp.get("/movies/<movie_id>/comments")
def list_comments(movie_id: str):
    """
    List the comments of a movie
    ---
    tags:
      - Comments
    parameters:
      - in: path
        name: movie_id
        type: string
        required: true
    responses:
      200:
        description: Comments of the movie, oldest first
      400:
        description: Invalid movie ID
    """
    require_id(movie_id, "movie")
    session = storage.get_session()
    rows = (
        session.query(Comment)
        .filter(Comment.movie_id == movie_id)
        .order_by(Comment.date.asc())
        .all()
    )
    return success(200, data=comments_out_schema.dump(rows))


@bp.post("/movies/<movie_id>/comments")
def create_comment(movie_id: str):
    """
    Add a comment to a movie
    ---
    tags:
      - Comments
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
          required: [name, email, text]
          properties:
            name: { type: string }
            email: { type: string }
            text: { type: string }
    responses:
      201:
        description: Comment added
      400:
        description: Invalid input or movie ID
      404:
        description: Movie not found
    """
    movie = get_movie_or_404(movie_id)
    data = comment_input_schema.load(request.get_json(silent=True) or {})
    comment = Comment(movie_id=movie.id, **data)
    storage.new(comment)
    storage.save()
    return success(201, message="Comment added", data=comment_out_schema.dump(comment))


@bp.get("/movies/<movie_id>/comments/<comment_id>")
def get_comment(movie_id: str, comment_id: str):
    """
    Get one comment of a movie
    ---
    tags:
      - Comments
    parameters:
      - in: path
        name: movie_id
        type: string
        required: true
      - in: path
        name: comment_id
        type: string
        required: true
    responses:
      200:
        description: Comment found
      400:
        description: Invalid movie ID or comment ID
      404:
        description: Comment not found
    """
    comment = get_comment_or_404(movie_id, comment_id)
    return success(200, data=comment_out_schema.dump(comment))


@bp.put("/movies/<movie_id>/comments/<comment_id>")
def update_comment(movie_id: str, comment_id: str):
    """
    Update a comment
    ---
    tags:
      - Comments
    consumes:
      - application/json
    parameters:
      - in: path
        name: movie_id
        type: string
        required: true
      - in: path
        name: comment_id
        type: string
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            name: { type: string }
            email: { type: string }
            text: { type: string }
    responses:
      200:
        description: Comment updated
      400:
        description: Invalid input
      404:
        description: Comment not found
    """
    comment = get_comment_or_404(movie_id, comment_id)
    data = comment_input_schema.load(request.get_json(silent=True) or {})
    for field, value in data.items():
        setattr(comment, field, value)
    storage.new(comment)
    storage.save()
    return success(200, message="Comment updated", data=comment_out_schema.dump(comment))


@bp.delete("/movies/<movie_id>/comments/<comment_id>")
def delete_comment(movie_id: str, comment_id: str):
    """
    Delete a comment
    ---
    tags:
      - Comments
    parameters:
      - in: path
        name: movie_id
        type: string
        required: true
      - in: path
        name: comment_id
        type: string
        required: true
    responses:
      200:
        description: Comment deleted
      404:
        description: Comment not found
    """
    comment = get_comment_or_404(movie_id, comment_id)
    storage.delete(comment)
    storage.save()
    return success(200, message="Comment deleted")
