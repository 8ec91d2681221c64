"""
Authentication blueprint:
- POST /auth/register
- POST /auth/login
- POST /auth/logout
- POST /auth/refresh-token
- GET  /auth/me

The routes only unwrap the request and shape the envelope; the flow itself
lives in services.auth_service.AuthService:
- argon2 password hashing
- short-lived access tokens and 7-day refresh tokens (JWTs signed with HS256)
- one stored refresh token per user, overwritten at login, dropped at logout
"""
from __future__ import annotations

from flask import Blueprint, request, g, current_app

from api.responses import success
from utils.decorators import jwt_required

bp = Blueprint("auth", __name__)


def _auth_service():
    return current_app.extensions["auth_service"]


@bp.post("/auth/register")
def register():
    """
    Register a new user.
    ---
    tags:
      - Auth
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [name, email, password]
          properties:
            name: { type: string, example: "Jane Doe" }
            email: { type: string, example: "jane@example.com" }
            password: { type: string, minLength: 9 }
    responses:
      201:
        description: User created (password hash never returned)
      400:
        description: Invalid or incomplete form
      409:
        description: User already exists
    """
    user = _auth_service().register(request.get_json(silent=True) or {})
    return success(201, message="User created", data=user)


@bp.post("/auth/login")
def login():
    """
    Login: returns an access token. The refresh token is kept server side.
    ---
    tags:
      - Auth
    consumes:
      - application/json
    parameters:
      -  in: body
         name: body
         required: true
         schema:
           type: object
           required: [email, password]
           properties:
             email: { type: string }
             password: { type: string }
    responses:
      200:
        description: OK (returns token and the user's name and email)
      400:
        description: Invalid credentials payload
      401:
        description: Incorrect password
      404:
        description: User not found
    """
    result = _auth_service().login(request.get_json(silent=True) or {})
    return success(
        200,
        message="Login successful",
        token=result["access_token"],
        data=result["user"],
    )


@bp.post("/auth/logout")
def logout():
    """
    Logout: deletes the caller's session
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    responses:
      200:
        description: Logged out
      400:
        description: Token missing or malformed
      401:
        description: Invalid or expired token
    """
    result = _auth_service().logout(request.headers.get("Authorization"))
    return success(200, message=result["message"])


@bp.post("/auth/refresh-token")
def refresh_token():
    """
    Exchange the stored refresh token for a new access token (no rotation)
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    responses:
      200:
        description: New access token
      400:
        description: Refresh token missing or malformed
      401:
        description: Invalid or expired token
      403:
        description: No session holds this refresh token
    """
    result = _auth_service().refresh(request.headers.get("Authorization"))
    return success(200, message=result["message"], token=result["token"])


@bp.get("/auth/me")
@jwt_required()
def me():
    """
    Get current user info.
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    responses:
      200:
        description: OK
      401:
        description: Unauthorized
    """
    return success(200, data=g.current_user)
