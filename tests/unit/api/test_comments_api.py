"""
HTTP-level tests for the /api/comentarios endpoints.
"""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from tests.factories import CommentFactory


class TestComments:
    @pytest.mark.asyncio
    async def test_get_comment(self, client: AsyncClient, seed) -> None:
        (comment,) = await seed(
            CommentFactory.build(comentario="Buen post", usuario_id=2, publicacion_id=5)
        )

        response = await client.get(f"/api/comentarios/{comment.comentario_id}")

        assert response.status_code == 200
        assert response.json() == {
            "comentario_id": comment.comentario_id,
            "comentario": "Buen post",
            "usuario_id": 2,
            "publicacion_id": 5,
        }

    @pytest.mark.asyncio
    async def test_missing_comment_is_404(self, client: AsyncClient) -> None:
        response = await client.get("/api/comentarios/3")

        assert response.status_code == 404
        assert response.json()["error"] == "Comentario no encontrado"

    @pytest.mark.asyncio
    async def test_update_comment_text(self, client: AsyncClient, seed) -> None:
        (comment,) = await seed(CommentFactory.build())

        response = await client.put(
            f"/api/comentarios/{comment.comentario_id}", json={"comentario": "Editado"}
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Comentario actualizado correctamente"}
        fetched = await client.get(f"/api/comentarios/{comment.comentario_id}")
        assert fetched.json()["comentario"] == "Editado"

    @pytest.mark.asyncio
    async def test_update_without_text_fails_in_storage(self, client: AsyncClient, seed) -> None:
        (comment,) = await seed(CommentFactory.build())

        response = await client.put(f"/api/comentarios/{comment.comentario_id}", json={})

        assert response.status_code == 500
        assert response.json()["error"] == "Error al actualizar el comentario"

    @pytest.mark.asyncio
    async def test_update_without_body_fails_in_storage(self, client: AsyncClient, seed) -> None:
        (comment,) = await seed(CommentFactory.build())

        response = await client.put(f"/api/comentarios/{comment.comentario_id}")

        assert response.status_code == 500
        assert response.json()["error"] == "Error al actualizar el comentario"

    @pytest.mark.asyncio
    async def test_update_from_form_body(self, client: AsyncClient, seed) -> None:
        (comment,) = await seed(CommentFactory.build())

        response = await client.put(
            f"/api/comentarios/{comment.comentario_id}", data={"comentario": "Desde formulario"}
        )

        assert response.status_code == 200
        fetched = await client.get(f"/api/comentarios/{comment.comentario_id}")
        assert fetched.json()["comentario"] == "Desde formulario"

    @pytest.mark.asyncio
    async def test_delete_comment(self, client: AsyncClient, seed) -> None:
        (comment,) = await seed(CommentFactory.build())

        response = await client.delete(f"/api/comentarios/{comment.comentario_id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Comentario eliminado correctamente"}
        assert (await client.get(f"/api/comentarios/{comment.comentario_id}")).status_code == 404

    @pytest.mark.asyncio
    async def test_there_is_no_create_route(self, client: AsyncClient) -> None:
        response = await client.post("/api/comentarios", json={"comentario": "x"})

        assert response.status_code in (404, 405)
