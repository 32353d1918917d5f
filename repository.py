# repository.py

"""
Store interface for the lookup operations.

The lookup core depends only on this protocol. ``sql_repository`` provides
the SQLAlchemy-backed implementation used by the API; tests substitute an
in-memory one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from models import Category, Post


@runtime_checkable
class PostRepository(Protocol):

    async def find_post_by_id(self, post_id: int) -> Optional[Post]:
        """Return the post with this id, or None."""
        ...

    async def find_category_by_key(self, key: str) -> Optional[Category]:
        """Return the category whose key equals ``key`` exactly, or None."""
        ...

    async def list_posts_by_category_id(self, category_id: int) -> Sequence[Post]:
        """Return every post referencing ``category_id``, in store order."""
        ...
