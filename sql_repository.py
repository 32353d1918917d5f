# sql_repository.py

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models import Category, Post

# Signed 64-bit range of an INTEGER primary key
MIN_KEY = -2**63
MAX_KEY = 2**63 - 1


class SqlAlchemyPostRepository:
    """PostRepository backed by an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_post_by_id(self, post_id: int) -> Optional[Post]:
        # Ids the column cannot hold are never stored
        if not MIN_KEY <= post_id <= MAX_KEY:
            return None
        return await self.session.get(Post, post_id)

    async def find_category_by_key(self, key: str) -> Optional[Category]:
        result = await self.session.execute(select(Category).where(Category.key == key))
        return result.scalar_one_or_none()

    async def list_posts_by_category_id(self, category_id: int) -> Sequence[Post]:
        # No ORDER BY: ordering is whatever the store returns
        result = await self.session.execute(select(Post).where(Post.category_id == category_id))
        return result.scalars().all()
