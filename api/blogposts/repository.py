"""
Blog post persistence (raw SQL).
"""

from __future__ import annotations

from core.repository import Repository, TableRepository

from .schemas import BlogPost

BlogPostRepository = Repository[BlogPost]


class PostgresBlogPostRepository(TableRepository[BlogPost]):
    table = "blog_posts"
    columns = ("title", "content")
    entity = BlogPost
