"""QuestionCatalog — ordered interview questions per category.

Responsibilities:
- Ordered reads by order_index with the default-question fallback
- Admin mutations: append, remove, edit text, reorder
- Reorder is computed in memory (domain.ordering) and persisted separately
  by save_order in a single transaction
"""

from uuid import UUID

import structlog
from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.exceptions import CatalogUnavailable, NotFound, SubmissionFailure
from app.db.models.chat_question import ChatQuestion
from app.domain.ordering import Direction, move_adjacent, neighbor_index
from app.domain.questions import DEFAULT_QUESTIONS

logger = structlog.get_logger(__name__)


class QuestionCatalog:
    """Read and maintain the chat_questions table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def fetch_questions(self, category: str) -> list[str]:
        """Return question texts for a category, ascending by order_index.

        Falls back to DEFAULT_QUESTIONS when the category has no rows or the
        store cannot be read. Never returns an empty list.
        """
        try:
            entries = await self.list_entries(category)
        except CatalogUnavailable as exc:
            logger.warning("catalog_unavailable", category=category, error=str(exc))
            return list(DEFAULT_QUESTIONS)

        if not entries:
            logger.info("catalog_default_questions", category=category)
            return list(DEFAULT_QUESTIONS)

        return [entry.question_text for entry in entries]

    async def list_entries(self, category: str) -> list[ChatQuestion]:
        """Return catalog rows for a category, ascending by order_index.

        Ties on order_index (left by remove then append) fall back to
        insertion order so every read returns the same sequence.

        Raises:
            CatalogUnavailable: If the store cannot be read
        """
        try:
            async with self.session_factory() as session:
                result = await session.execute(
                    select(ChatQuestion)
                    .where(ChatQuestion.category == category)
                    .order_by(ChatQuestion.order_index.asc(), ChatQuestion.created_at.asc(), ChatQuestion.id.asc())
                )
                return list(result.scalars().all())
        except (SQLAlchemyError, OSError, TimeoutError) as exc:
            # asyncpg connect errors reach here unwrapped
            raise CatalogUnavailable(f"Could not read questions for '{category}'") from exc

    async def append(self, category: str, text: str) -> ChatQuestion:
        """Add a question at the end of a category's list.

        The new order_index is the current list length.

        Raises:
            ValueError: If text is blank
            SubmissionFailure: If the insert fails
        """
        text = text.strip()
        if not text:
            raise ValueError("Question text cannot be empty")

        existing = await self.list_entries(category)
        entry = ChatQuestion(category=category, question_text=text, order_index=len(existing))

        try:
            async with self.session_factory() as session:
                session.add(entry)
                await session.commit()
                await session.refresh(entry)
        except SQLAlchemyError as exc:
            raise SubmissionFailure("Could not add question") from exc

        logger.info("question_appended", category=category, question_id=str(entry.id), order_index=entry.order_index)
        return entry

    async def remove(self, question_id: UUID) -> None:
        """Delete a question. Siblings keep their order_index values.

        Raises:
            NotFound: If no question has this id
            SubmissionFailure: If the delete fails
        """
        try:
            async with self.session_factory() as session:
                entry = await session.get(ChatQuestion, question_id)
                if entry is None:
                    raise NotFound("Question not found")
                await session.delete(entry)
                await session.commit()
        except SQLAlchemyError as exc:
            raise SubmissionFailure("Could not delete question") from exc

        logger.info("question_removed", question_id=str(question_id))

    async def edit_text(self, question_id: UUID, text: str) -> ChatQuestion:
        """Replace a question's text; id and order_index are unchanged.

        Raises:
            ValueError: If text is blank
            NotFound: If no question has this id
            SubmissionFailure: If the update fails
        """
        text = text.strip()
        if not text:
            raise ValueError("Question text cannot be empty")

        try:
            async with self.session_factory() as session:
                entry = await session.get(ChatQuestion, question_id)
                if entry is None:
                    raise NotFound("Question not found")
                entry.question_text = text
                await session.commit()
                await session.refresh(entry)
                return entry
        except SQLAlchemyError as exc:
            raise SubmissionFailure("Could not update question") from exc

    async def reorder(self, category: str, index: int, direction: Direction) -> list[ChatQuestion]:
        """Swap the entry at ``index`` with its neighbor and persist the new order.

        A move past either end is a no-op and issues no writes. If saving
        fails the stored order may differ from the caller's copy; re-fetch
        before retrying.

        Returns:
            Entries in their new order
        """
        entries = await self.list_entries(category)
        if neighbor_index(index, direction, len(entries)) is None:
            return entries

        reordered = move_adjacent(entries, index, direction)
        await self.save_order(reordered)
        return reordered

    async def save_order(self, entries: list[ChatQuestion]) -> None:
        """Persist order_index = position for every entry in one transaction.

        Raises:
            SubmissionFailure: If the transaction fails (nothing is written)
        """
        try:
            async with self.session_factory() as session:
                for position, entry in enumerate(entries):
                    await session.execute(
                        update(ChatQuestion).where(ChatQuestion.id == entry.id).values(order_index=position)
                    )
                await session.commit()
        except SQLAlchemyError as exc:
            raise SubmissionFailure("Could not save question order") from exc

        for position, entry in enumerate(entries):
            entry.order_index = position

        logger.info("question_order_saved", count=len(entries))
