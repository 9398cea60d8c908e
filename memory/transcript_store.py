"""
Async transcript store.
Append-only persistence of conversation units with async SQLAlchemy.
"""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from core import get_logger, DatabaseException
from memory.models import Base, TranscriptMessage
from schemas import TranscriptEntryCreateSchema, TranscriptEntrySchema

logger = get_logger(__name__)


def _to_row(entry: TranscriptEntryCreateSchema, created_at: datetime) -> TranscriptMessage:
    return TranscriptMessage(
        user_id=entry.user_id,
        sender_id=entry.sender_id,
        type=entry.type,
        payload=entry.payload,
        order=entry.order,
        created_at=created_at,
    )


class AsyncTranscriptStore:
    """
    Transcript store backed by PostgreSQL.

    - append() stores one entry, insertion time orders it
    - append_batch() stores entries in one transaction with a shared
      created_at, so their relative position comes from the order column
    """

    def __init__(self, database_url: str, echo: bool = False):
        """Initialize async database engine and session factory."""
        # Convert postgresql:// to postgresql+asyncpg://
        db_url = database_url
        if db_url.startswith("postgresql://"):
            db_url = db_url.replace("postgresql://", "postgresql+asyncpg://", 1)

        self.engine: AsyncEngine = create_async_engine(
            db_url,
            echo=echo,
            pool_size=5,
            max_overflow=10,
            pool_pre_ping=True,  # Verify connections before use
            pool_recycle=3600,  # Recycle connections after 1 hour
        )

        self.async_session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

        logger.info("Transcript store initialized", db_url=db_url.split("@")[-1])

    @asynccontextmanager
    async def get_session(self) -> AsyncIterator[AsyncSession]:
        """
        Context manager for database sessions with automatic cleanup.

        Yields:
            AsyncSession instance
        """
        async with self.async_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                await session.rollback()
                logger.error("Session rolled back", error=str(e))
                raise
            finally:
                await session.close()

    async def create_tables(self) -> None:
        """Create the transcript table if missing."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Transcript tables created")

    async def close(self) -> None:
        await self.engine.dispose()

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type(SQLAlchemyError),
        reraise=True,
    )
    async def _insert(
        self, entries: List[TranscriptEntryCreateSchema]
    ) -> List[TranscriptEntrySchema]:
        created_at = datetime.utcnow()
        async with self.get_session() as session:
            rows = [_to_row(entry, created_at) for entry in entries]
            session.add_all(rows)
            await session.flush()  # Get the IDs
            return [TranscriptEntrySchema.model_validate(row) for row in rows]

    async def append(self, entry: TranscriptEntryCreateSchema) -> TranscriptEntrySchema:
        """
        Append a single transcript entry.

        Raises:
            DatabaseException: If the insert keeps failing
        """
        try:
            stored = (await self._insert([entry]))[0]
            logger.debug(
                "Transcript entry stored",
                entry_id=stored.id,
                user_id=entry.user_id,
                type=entry.type,
            )
            return stored
        except SQLAlchemyError as e:
            logger.error("Failed to append transcript entry", user_id=entry.user_id, error=str(e))
            raise DatabaseException(f"Failed to append transcript entry: {e}") from e

    async def append_batch(
        self, entries: List[TranscriptEntryCreateSchema]
    ) -> List[TranscriptEntrySchema]:
        """
        Append entries in one transaction, returned in the order given.

        Raises:
            DatabaseException: If the insert keeps failing
        """
        if not entries:
            return []
        try:
            stored = await self._insert(entries)
            logger.debug(
                "Transcript batch stored",
                user_id=entries[0].user_id,
                count=len(stored),
            )
            return stored
        except SQLAlchemyError as e:
            logger.error(
                "Failed to append transcript batch",
                user_id=entries[0].user_id,
                count=len(entries),
                error=str(e),
            )
            raise DatabaseException(f"Failed to append transcript batch: {e}") from e

