"""
Pydantic schemas for API request/response serialization.

Request bodies carry no presence validation: every field is optional and an
absent field reaches storage as NULL. Response schemas mirror the column
names of the underlying tables.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RequestBody(BaseModel):
    """Base for request bodies. Numbers sent for text fields are stored as text."""

    model_config = ConfigDict(coerce_numbers_to_str=True)


# -----------------------------------------------------------------------------
# User Schemas
# -----------------------------------------------------------------------------


class UserWrite(RequestBody):
    """Body for creating or updating a user."""

    usuariosNombre: str | None = Field(default=None, description="Display name.")
    email: str | None = Field(default=None, description="Email address.")


class UserResponse(BaseModel):
    """Public projection of a user row."""

    usuarios_id: int
    usuarios_nombre: str | None = None
    email: str | None = None


class UserCreated(BaseModel):
    message: str
    userId: int


# -----------------------------------------------------------------------------
# Post Schemas
# -----------------------------------------------------------------------------


class PostCreate(RequestBody):
    """Body for creating a post."""

    titulo: str | None = Field(default=None, description="Post title.")
    contenido: str | None = Field(default=None, description="Post body.")
    usuariosId: int | None = Field(default=None, description="Owning user id.")


class PostUpdate(RequestBody):
    """Body for updating a post; only title and content are writable."""

    titulo: str | None = None
    contenido: str | None = None


class PostSummary(BaseModel):
    """Post row without its category."""

    publicaciones_id: int
    titulo: str | None = None
    contenido: str | None = None
    usuarios_id: int | None = None


class PostResponse(PostSummary):
    """Full post row, including any column the table has beyond the mapped ones."""

    model_config = ConfigDict(extra="allow")

    categoria_id: int | None = None


class PostCreated(BaseModel):
    message: str
    publicacionId: int


# -----------------------------------------------------------------------------
# Comment Schemas
# -----------------------------------------------------------------------------


class CommentUpdate(RequestBody):
    """Body for updating a comment."""

    comentario: str | None = Field(default=None, description="Comment text.")


class PostCommentResponse(BaseModel):
    """Comment as listed under its post."""

    comentario_id: int
    comentario: str | None = None
    usuario_id: int | None = None


class CommentResponse(PostCommentResponse):
    """Single comment including the post it belongs to."""

    publicacion_id: int | None = None


# -----------------------------------------------------------------------------
# Envelopes
# -----------------------------------------------------------------------------


class MessageResponse(BaseModel):
    """Acknowledgement returned by update and delete operations."""

    message: str


class ErrorDetail(BaseModel):
    """Structured error detail."""

    field: str | None = Field(default=None, description="Field that caused the error.")
    message: str = Field(..., description="Human-readable error message.")
    code: str | None = Field(default=None, description="Machine-readable error code.")


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Human-readable error description.")
    details: list[ErrorDetail] | None = Field(
        default=None,
        description="Field-level information for request validation failures.",
    )
    request_id: str | None = Field(default=None, description="Request trace ID for debugging.")


__all__ = [
    "CommentResponse",
    "CommentUpdate",
    "ErrorDetail",
    "ErrorResponse",
    "MessageResponse",
    "PostCommentResponse",
    "PostCreate",
    "PostCreated",
    "PostResponse",
    "PostSummary",
    "PostUpdate",
    "RequestBody",
    "UserCreated",
    "UserResponse",
    "UserWrite",
]
