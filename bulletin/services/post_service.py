"""
Post service: data access for the Article table.

Design notes
------------
- Each public function issues exactly one statement against ``articles``
  (``update_post`` with an empty patch falls back to an existence check).
- Mutations report success from the statement's ``rowcount`` instead of
  loading the row first, so "not found" is decided by the database.
- Service functions flush but do not commit; the transaction boundary
  is owned by the ``get_db`` dependency in the router layer.
"""
import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from bulletin.models import Article
from bulletin.schemas import PostCreate, PostUpdate

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Serialisation helpers
# ---------------------------------------------------------------------------

def _post_to_dict(article: Article) -> dict:
    """Serialise an Article ORM instance to a plain dict."""
    return {
        "id": str(article.id),
        "title": article.title,
        "content": article.content,
        "published_at": article.published_at.isoformat() if article.published_at else None,
        "is_published": article.is_published,
        "is_deleted": article.is_deleted,
        "deleted_at": article.deleted_at.isoformat() if article.deleted_at else None,
    }


async def _list_where(db: AsyncSession, *criteria) -> list[dict]:
    q = select(Article).where(*criteria).order_by(Article.published_at.desc())
    result = await db.execute(q)
    return [_post_to_dict(a) for a in result.scalars().all()]


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

async def create_post(db: AsyncSession, data: PostCreate) -> uuid.UUID:
    """Insert a new post stamped with a fresh id and ``published_at = now``."""
    article = Article(
        id=uuid.uuid4(),
        title=data.title,
        content=data.content,
        published_at=datetime.now(timezone.utc),
        is_published=data.is_published,
        is_deleted=False,
        deleted_at=None,
    )
    db.add(article)
    await db.flush()
    logger.info("Created post %s", article.id)
    return article.id


async def get_post(db: AsyncSession, post_id: uuid.UUID) -> dict | None:
    """
    Return the post identified by *post_id*, or None when absent.

    Soft-deleted posts are still returned; only the list views filter them.
    """
    result = await db.execute(select(Article).where(Article.id == post_id))
    article = result.scalar_one_or_none()
    if article is None:
        return None
    return _post_to_dict(article)


async def list_posts(db: AsyncSession) -> list[dict]:
    """Published posts that have not been removed."""
    return await _list_where(db, Article.is_deleted.is_(False), Article.is_published.is_(True))


async def list_all_posts(db: AsyncSession) -> list[dict]:
    """Every post that has not been removed, drafts included."""
    return await _list_where(db, Article.is_deleted.is_(False))


async def list_deleted_posts(db: AsyncSession) -> list[dict]:
    return await _list_where(db, Article.is_deleted.is_(True))


async def update_post(db: AsyncSession, post_id: uuid.UUID, data: PostUpdate) -> bool:
    """
    Apply only the fields present in *data* to the post.

    Returns True when a row matched, False when the post does not exist.
    """
    patch = data.model_dump(exclude_unset=True)
    if not patch:
        # Nothing to write; still answer 404 for unknown ids.
        result = await db.execute(select(Article.id).where(Article.id == post_id))
        return result.scalar_one_or_none() is not None

    result = await db.execute(
        update(Article).where(Article.id == post_id).values(**patch)
    )
    if result.rowcount > 0:
        logger.info("Updated post %s (%s)", post_id, ", ".join(sorted(patch)))
        return True
    return False


async def delete_post(db: AsyncSession, post_id: uuid.UUID) -> bool:
    """Permanently delete the post. Returns False when it does not exist."""
    result = await db.execute(delete(Article).where(Article.id == post_id))
    if result.rowcount > 0:
        logger.info("Deleted post %s", post_id)
        return True
    return False


async def remove_post(db: AsyncSession, post_id: uuid.UUID) -> bool:
    """
    Soft-delete the post: ``is_deleted`` and ``deleted_at`` are written in
    the same statement. Returns False when the post does not exist.
    """
    result = await db.execute(
        update(Article)
        .where(Article.id == post_id)
        .values(is_deleted=True, deleted_at=datetime.now(timezone.utc))
    )
    if result.rowcount > 0:
        logger.info("Removed post %s", post_id)
        return True
    return False
