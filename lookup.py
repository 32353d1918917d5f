# lookup.py

import logging
from typing import List

from errors import CategoryNotFound, PostNotFound
from repository import PostRepository

logger = logging.getLogger(__name__)

# Resolve a single post by its identifier
async def get_post(repository: PostRepository, post_id: int):
    """Return the post with ``post_id``; raise PostNotFound if there is none."""
    logger.debug("Looking up post %s", post_id)
    post = await repository.find_post_by_id(post_id)
    if post is None:
        logger.info("Post %s not found", post_id)
        raise PostNotFound(post_id)
    return post

# Resolve a category by key, then list the posts that reference it
async def list_posts_by_category(repository: PostRepository, key: str) -> List:
    """Return all posts belonging to the category with ``key``.

    An unknown key raises CategoryNotFound before any post query runs.
    A known category with no posts yields an empty list.
    """
    logger.debug("Listing posts for category %r", key)
    category = await repository.find_category_by_key(key)
    if category is None:
        logger.info("Category %r not found", key)
        raise CategoryNotFound(key)
    posts = await repository.list_posts_by_category_id(category.id)
    return list(posts)
