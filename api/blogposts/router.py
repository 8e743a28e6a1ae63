"""
Blog post API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Response, status

from core import db, resources

from .repository import BlogPostRepository, PostgresBlogPostRepository
from .schemas import BlogPost

LABEL = "Blog post"

router = APIRouter()


def get_repository(conn: asyncpg.Connection = Depends(db.get_connection)) -> BlogPostRepository:
    return PostgresBlogPostRepository(conn)


@router.get("/blogposts", response_model=list[BlogPost])
async def list_blog_posts(repository: BlogPostRepository = Depends(get_repository)) -> list[BlogPost]:
    return await repository.find_all()


@router.get("/blogposts/{post_id}", response_model=BlogPost)
async def get_blog_post(
    post_id: int,
    repository: BlogPostRepository = Depends(get_repository),
) -> BlogPost:
    return await resources.get_or_404(repository, post_id, label=LABEL)


@router.post("/blogposts", response_model=BlogPost, status_code=status.HTTP_201_CREATED)
async def create_blog_post(
    post: BlogPost,
    repository: BlogPostRepository = Depends(get_repository),
) -> BlogPost:
    return await resources.create(repository, post, label=LABEL)


@router.put("/blogposts/{post_id}", response_model=BlogPost)
async def update_blog_post(
    post_id: int,
    post: BlogPost,
    repository: BlogPostRepository = Depends(get_repository),
) -> BlogPost:
    return await resources.replace_or_404(repository, post_id, post, label=LABEL)


@router.delete("/blogposts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog_post(
    post_id: int,
    repository: BlogPostRepository = Depends(get_repository),
) -> Response:
    await resources.delete_or_404(repository, post_id, label=LABEL)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
