"""
SQLAlchemy ORM mappings for the users, posts and comments tables.

The schema is owned by the database; these mappings only describe it so
that queries can be built with bound parameters. Column names are kept as
they exist in storage because they are returned verbatim to API clients.
"""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(AsyncAttrs, DeclarativeBase):
    """Declarative base that enables async-friendly ORM operations."""

    pass


class User(Base):
    """Registered user."""

    __tablename__ = "usuarios"

    usuarios_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    usuarios_nombre: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)


class Post(Base):
    """Post written by a user, optionally filed under a category."""

    __tablename__ = "publicaciones"

    publicaciones_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    titulo: Mapped[str] = mapped_column(String(255), nullable=False)
    contenido: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Not validated by the gateway; deleting a user leaves orphans.
    usuarios_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("usuarios.usuarios_id"), nullable=True
    )
    categoria_id: Mapped[int | None] = mapped_column(Integer, nullable=True)


class Comment(Base):
    """Comment left by a user on a post."""

    __tablename__ = "comentarios"

    comentario_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    comentario: Mapped[str] = mapped_column(Text, nullable=False)
    usuario_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("usuarios.usuarios_id"), nullable=True
    )
    publicacion_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("publicaciones.publicaciones_id"), nullable=True
    )


__all__ = ["Base", "Comment", "Post", "User"]
