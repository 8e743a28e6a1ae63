"""
Table definitions, one table per resource.

Applied with `CREATE TABLE IF NOT EXISTS` at startup when `DB_CREATE_SCHEMA`
is on. There is no migration tooling; changing a column means changing the
table by hand.
"""

from __future__ import annotations

TABLES = ("projects", "blog_posts", "contact_info")

STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS projects (
        id BIGSERIAL PRIMARY KEY,
        title TEXT NOT NULL,
        description TEXT,
        github_link TEXT,
        spring_boot BOOLEAN NOT NULL DEFAULT false
    )
    """,
    """
    CREATE INDEX IF NOT EXISTS projects_spring_boot_idx
    ON projects (spring_boot)
    WHERE spring_boot
    """,
    """
    CREATE TABLE IF NOT EXISTS blog_posts (
        id BIGSERIAL PRIMARY KEY,
        title TEXT NOT NULL,
        content TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS contact_info (
        id BIGSERIAL PRIMARY KEY,
        email TEXT,
        phone TEXT,
        linkedin TEXT,
        github TEXT
    )
    """,
)
