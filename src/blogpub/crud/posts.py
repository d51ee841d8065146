"""Conversion ledger persistence: record written posts and look them up"""

from datetime import datetime

from sqlmodel import Session, select

from blogpub.crud.models import ConvertedPost


def get_post(session: Session, source_path: str, bundle: str) -> ConvertedPost | None:
    """Return the ledger entry for (source_path, bundle), or None if not found."""
    return session.exec(
        select(ConvertedPost)
        .where(ConvertedPost.source_path == source_path)
        .where(ConvertedPost.bundle == bundle)
    ).one_or_none()


def get_by_source(session: Session, source_path: str) -> list[ConvertedPost]:
    """Return all ledger entries written from one source file."""
    return list(session.exec(select(ConvertedPost).where(ConvertedPost.source_path == source_path)).all())


def get_all_posts(session: Session) -> list[ConvertedPost]:
    """Return every ledger entry ordered by date then bundle name."""
    return list(session.exec(select(ConvertedPost).order_by(ConvertedPost.date, ConvertedPost.bundle)).all())


def record_post(
    session: Session,
    data: dict,
    converted_at: datetime | None = None,
    ) -> tuple[ConvertedPost, str]:
    """Upsert a written post keyed by data['source_path'] and data['bundle'].

    Returns (post, status) where status is 'created', 'updated', or 'unchanged'.
    Flushes but does not commit; caller controls the transaction.
    """
    post = get_post(session, data['source_path'], data['bundle'])

    if post:
        if post.hash == data['hash']:
            return post, 'unchanged'
        post.title = data['title']
        post.date = data['date']
        post.hash = data['hash']
        post.output_path = data['output_path']
        post.updated_at = datetime.now()
        post.converted_at = converted_at
        session.add(post)
        session.flush()
        return post, 'updated'

    post = ConvertedPost(
        source_path=data['source_path'],
        bundle=data['bundle'],
        title=data['title'],
        date=data['date'],
        hash=data['hash'],
        output_path=data['output_path'],
        converted_at=converted_at,
    )
    session.add(post)
    session.flush()
    return post, 'created'
