"""
API route definitions for the users, posts and comments gateway.

Every handler runs exactly one statement through its repository inside
``storage_guard``, which turns any query failure into a 500 carrying the
handler's message. Route order within each router matters: Starlette
matches in registration order.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, status

from .dependencies import (
    FORM_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    CommentBodyDep,
    CommentRepoDep,
    PostCreateBodyDep,
    PostRepoDep,
    PostUpdateBodyDep,
    UserBodyDep,
    UserRepoDep,
)
from .errors import NotFoundError, storage_guard
from .schemas import (
    CommentResponse,
    CommentUpdate,
    ErrorResponse,
    MessageResponse,
    PostCommentResponse,
    PostCreate,
    PostCreated,
    PostResponse,
    PostSummary,
    PostUpdate,
    RequestBody,
    UserCreated,
    UserResponse,
    UserWrite,
)

LOGGER = logging.getLogger(__name__)

STORAGE_FAILURE = {500: {"model": ErrorResponse, "description": "Query failed"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "No matching row"}}


def _body_docs(model: type[RequestBody]) -> dict[str, Any]:
    """Describe a body read by ``request_body`` in the OpenAPI document."""
    schema = model.model_json_schema()
    return {
        "requestBody": {
            "content": {
                JSON_CONTENT_TYPE: {"schema": schema},
                FORM_CONTENT_TYPE: {"schema": schema},
            }
        }
    }


# -----------------------------------------------------------------------------
# Router Definitions
# -----------------------------------------------------------------------------

users_router = APIRouter(prefix="/api/users", tags=["Users"], responses=STORAGE_FAILURE)
admin_router = APIRouter(prefix="/api/admin", tags=["Admin"], responses=STORAGE_FAILURE)
posts_router = APIRouter(prefix="/api/publicaciones", tags=["Posts"], responses=STORAGE_FAILURE)
comments_router = APIRouter(
    prefix="/api/comentarios", tags=["Comments"], responses=STORAGE_FAILURE
)


# -----------------------------------------------------------------------------
# Users Endpoints
# -----------------------------------------------------------------------------


@users_router.get("", response_model=list[UserResponse], summary="List users")
async def list_users(repo: UserRepoDep) -> list[dict[str, Any]]:
    """Return every user's id, name and email."""
    async with storage_guard(repo.session, "Error al obtener usuarios"):
        return await repo.list_all()


@users_router.get(
    "/{user_id}", response_model=UserResponse, summary="Get user by ID", responses=NOT_FOUND
)
async def get_user(user_id: str, repo: UserRepoDep) -> dict[str, Any]:
    async with storage_guard(repo.session, "Error al obtener usuario"):
        user = await repo.get(user_id)
    if user is None:
        raise NotFoundError("Usuario no encontrado")
    return user


@users_router.post(
    "",
    response_model=UserCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    openapi_extra=_body_docs(UserWrite),
)
async def create_user(body: UserBodyDep, repo: UserRepoDep) -> UserCreated:
    async with storage_guard(repo.session, "Error al crear usuario"):
        user_id = await repo.create(body.usuariosNombre, body.email)
    LOGGER.info("Created user %s", user_id)
    return UserCreated(message="Usuario creado correctamente", userId=user_id)


@users_router.put(
    "/{user_id}",
    response_model=MessageResponse,
    summary="Update user",
    openapi_extra=_body_docs(UserWrite),
)
async def update_user(user_id: str, body: UserBodyDep, repo: UserRepoDep) -> MessageResponse:
    """Overwrite name and email. Succeeds even when no row matched."""
    async with storage_guard(repo.session, "Error al actualizar datos de usuario"):
        await repo.update(user_id, body.usuariosNombre, body.email)
    return MessageResponse(message="Datos de usuario actualizados correctamente")


@users_router.delete("/{user_id}", response_model=MessageResponse, summary="Delete user")
async def delete_user(user_id: str, repo: UserRepoDep) -> MessageResponse:
    """Delete a user. Posts and comments that reference it are left in place."""
    async with storage_guard(repo.session, "Error al eliminar cuenta de usuario"):
        await repo.delete(user_id)
    return MessageResponse(message="Cuenta de usuario eliminada correctamente")


admin_router.add_api_route(
    "/users",
    list_users,
    methods=["GET"],
    response_model=list[UserResponse],
    summary="List users (admin)",
)


# -----------------------------------------------------------------------------
# Posts Endpoints
# -----------------------------------------------------------------------------


@posts_router.get("", response_model=list[PostResponse], summary="List posts")
async def list_posts(repo: PostRepoDep) -> list[dict[str, Any]]:
    """Return every post with all of its columns."""
    async with storage_guard(repo.session, "Error al obtener publicaciones"):
        return await repo.list_all()


@posts_router.get(
    "/{post_id}", response_model=PostSummary, summary="Get post by ID", responses=NOT_FOUND
)
async def get_post(post_id: str, repo: PostRepoDep) -> dict[str, Any]:
    async with storage_guard(repo.session, "Error al obtener publicación"):
        post = await repo.get(post_id)
    if post is None:
        raise NotFoundError("Publicación no encontrada")
    return post


@posts_router.post(
    "",
    response_model=PostCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create post",
    openapi_extra=_body_docs(PostCreate),
)
async def create_post(body: PostCreateBodyDep, repo: PostRepoDep) -> PostCreated:
    async with storage_guard(repo.session, "Error al crear la publicación"):
        post_id = await repo.create(body.titulo, body.contenido, body.usuariosId)
    LOGGER.info("Created post %s", post_id)
    return PostCreated(message="Publicación creada correctamente", publicacionId=post_id)


@posts_router.put(
    "/{post_id}",
    response_model=MessageResponse,
    summary="Update post",
    openapi_extra=_body_docs(PostUpdate),
)
async def update_post(
    post_id: str, body: PostUpdateBodyDep, repo: PostRepoDep
) -> MessageResponse:
    async with storage_guard(repo.session, "Error al actualizar la publicación"):
        await repo.update(post_id, body.titulo, body.contenido)
    return MessageResponse(message="Publicación actualizada correctamente")


@posts_router.delete("/{post_id}", response_model=MessageResponse, summary="Delete post")
async def delete_post(post_id: str, repo: PostRepoDep) -> MessageResponse:
    async with storage_guard(repo.session, "Error al eliminar la publicación"):
        await repo.delete(post_id)
    return MessageResponse(message="Publicación eliminada correctamente")


@posts_router.get(
    "/{post_id}/comentarios",
    response_model=list[PostCommentResponse],
    summary="List comments of a post",
)
async def list_post_comments(post_id: str, repo: CommentRepoDep) -> list[dict[str, Any]]:
    async with storage_guard(repo.session, "Error al obtener comentarios de la publicación"):
        return await repo.list_for_post(post_id)


@posts_router.get(
    "/categorias/{categoria_id}",
    response_model=list[PostResponse],
    summary="Filter posts by category",
)
async def list_posts_by_category(categoria_id: str, repo: PostRepoDep) -> list[dict[str, Any]]:
    async with storage_guard(repo.session, "Error al obtener publicaciones por categoría"):
        return await repo.list_by_category(categoria_id)


@posts_router.get(
    "/buscar/{titulo}",
    response_model=list[PostResponse],
    summary="Search posts by title",
)
async def search_posts(titulo: str, repo: PostRepoDep) -> list[dict[str, Any]]:
    """Substring match on the title; an empty list when nothing matches."""
    async with storage_guard(repo.session, "Error al buscar publicaciones por título"):
        return await repo.search_by_title(titulo)


# -----------------------------------------------------------------------------
# Comments Endpoints
# -----------------------------------------------------------------------------


@comments_router.get(
    "/{comment_id}",
    response_model=CommentResponse,
    summary="Get comment by ID",
    responses=NOT_FOUND,
)
async def get_comment(comment_id: str, repo: CommentRepoDep) -> dict[str, Any]:
    async with storage_guard(repo.session, "Error al obtener comentario"):
        comment = await repo.get(comment_id)
    if comment is None:
        raise NotFoundError("Comentario no encontrado")
    return comment


@comments_router.put(
    "/{comment_id}",
    response_model=MessageResponse,
    summary="Update comment",
    openapi_extra=_body_docs(CommentUpdate),
)
async def update_comment(
    comment_id: str, body: CommentBodyDep, repo: CommentRepoDep
) -> MessageResponse:
    """Replace the comment text. A missing ``comentario`` is sent as NULL."""
    async with storage_guard(repo.session, "Error al actualizar el comentario"):
        await repo.update(comment_id, body.comentario)
    return MessageResponse(message="Comentario actualizado correctamente")


@comments_router.delete("/{comment_id}", response_model=MessageResponse, summary="Delete comment")
async def delete_comment(comment_id: str, repo: CommentRepoDep) -> MessageResponse:
    async with storage_guard(repo.session, "Error al eliminar el comentario"):
        await repo.delete(comment_id)
    return MessageResponse(message="Comentario eliminado correctamente")


__all__ = ["admin_router", "comments_router", "posts_router", "users_router"]
