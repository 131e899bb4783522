"""Fixture database generation.

A run creates a fresh SQLite file under ``<working_dir>/tmp``, builds the
users/tags/user_tags schema, fills it with random rows inside a single
transaction and publishes the result to ``<working_dir>/build``.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tagseed.application.stopwatch import Stopwatch
from tagseed.data import RANK_MAX, RANK_MIN
from tagseed.domain.fixtures import FixtureSources, GenerationLimits, SeedStats
from tagseed.domain.shared.exceptions import GenerationError
from tagseed.domain.shared.time import local_now
from tagseed.infrastructure.files import (
    create_temporary_file,
    discard,
    ensure_directories,
    publish,
    unique_destination,
)
from tagseed.infrastructure.persistence.sqlalchemy import (
    TagRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
    UserTagRepositorySQLAlchemy,
    create_sqlite_engine,
    get_session_maker,
)
from tagseed.infrastructure.persistence.sqlalchemy import create_tables as create_schema
from tagseed_config.settings import Settings

logger = logging.getLogger(__name__)

FILENAME_SUFFIX = "-database.sqlite"
PROGRESS_INTERVAL = 10_000


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of a successful run."""

    path: Path
    stats: SeedStats
    duration_ms: int
    memory_mb: Optional[float]


class Generator:
    """Builds one fixture database per call to :meth:`execute`."""

    def __init__(
        self,
        sources: FixtureSources,
        limits: Optional[GenerationLimits] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = local_now,
        echo: bool = False,
    ):
        self._sources = sources
        self._limits = limits or GenerationLimits()
        self._rng = rng or random.Random()
        self._clock = clock
        self._echo = echo

    @classmethod
    def from_settings(cls, settings: Settings) -> Generator:
        """Create a generator from configuration."""
        sources = FixtureSources.from_files(
            names_file=settings.names_file,
            labels_file=settings.labels_file,
        )
        limits = GenerationLimits(
            desired_user_entries=settings.desired_user_entries,
            min_tag_assocs=settings.desired_min_tag_assocs,
            max_tag_assocs=settings.desired_max_tag_assocs,
        )
        return cls(
            sources=sources,
            limits=limits,
            rng=random.Random(settings.random_seed),
            echo=settings.database_echo,
        )

    @property
    def sources(self) -> FixtureSources:
        return self._sources

    @property
    def limits(self) -> GenerationLimits:
        return self._limits

    def execute(self, working_dir: Path) -> Path:
        """Generate a database and return the path it was published to."""
        return self.generate(working_dir).path

    def generate(self, working_dir: Path) -> GenerationResult:
        """Generate a database and return its path with run statistics.

        Raises
        ------
        GenerationError
            If inserting rows failed. No file is published in that case.
        """
        stopwatch = Stopwatch("generate").start()

        filename = self.generate_file_name(self._clock())
        tmp_dir, build_dir = ensure_directories(Path(working_dir))
        temporary_path = create_temporary_file(tmp_dir, filename)

        try:
            stats = self._populate(temporary_path)
        except Exception:
            logger.error("Generation failed, discarding %s", temporary_path)
            discard(temporary_path)
            raise

        destination = publish(temporary_path, unique_destination(build_dir / filename))

        event = stopwatch.stop()
        if event.memory_mb is None:
            logger.info("Execution took %dms", event.duration_ms)
        else:
            logger.info(
                "Execution took %dms and consumed %.1fMB",
                event.duration_ms,
                event.memory_mb,
            )

        return GenerationResult(
            path=destination,
            stats=stats,
            duration_ms=event.duration_ms,
            memory_mb=event.memory_mb,
        )

    def _populate(self, database_path: Path) -> SeedStats:
        engine = self.create_connection(database_path)
        try:
            self.create_tables(engine)
            with get_session_maker(engine)() as session:
                return self.insert_fake_data(session)
        finally:
            # Release the file before it is copied
            engine.dispose()

    def create_connection(self, database_path: Path) -> Engine:
        return create_sqlite_engine(database_path, echo=self._echo)

    def create_tables(self, engine: Engine) -> None:
        create_schema(engine)

    def insert_fake_data(self, session: Session) -> SeedStats:
        """Insert tags, users and associations in one transaction.

        On a database error the whole transaction is rolled back and
        GenerationError is raised.
        """
        tag_repo = TagRepositorySQLAlchemy(session)
        user_repo = UserRepositorySQLAlchemy(session)
        user_tag_repo = UserTagRepositorySQLAlchemy(session)

        try:
            with session.begin():
                tag_ids = self.insert_tags(tag_repo)

                users_created = 0
                user_tags_created = 0

                # Inclusive bound: desired_user_entries + 1 users
                for _ in range(self._limits.expected_user_count):
                    user_id = self.insert_user(user_repo)
                    users_created += 1

                    assoc_count = self._rng.randint(
                        self._limits.min_tag_assocs,
                        self._limits.max_tag_assocs,
                    )
                    for _ in range(assoc_count):
                        tag_id = self._rng.choice(tag_ids)
                        rank = self._rng.randint(RANK_MIN, RANK_MAX)
                        self.associate_user_with_tag(
                            user_tag_repo, user_id, tag_id, rank
                        )
                        user_tags_created += 1

                    if users_created % PROGRESS_INTERVAL == 0:
                        logger.debug("Inserted %d users so far", users_created)

                logger.info(
                    "Finished inserting %d users with %d tag associations.",
                    users_created,
                    user_tags_created,
                )
        except SQLAlchemyError as e:
            logger.exception("Something went wrong and the queries were rolled back.")
            msg = "Inserting fixture data failed; all queries were rolled back"
            raise GenerationError(msg, details={"error": str(e)}) from e

        return SeedStats(
            tags_created=len(tag_ids),
            users_created=users_created,
            user_tags_created=user_tags_created,
        )

    def insert_tags(self, tag_repo: TagRepositorySQLAlchemy) -> list[int]:
        """Insert every label once and return the ids they were assigned."""
        tag_ids = tag_repo.add_all(self._sources.labels)
        logger.debug("Inserted %d tags", len(tag_ids))
        return tag_ids

    def insert_user(self, user_repo: UserRepositorySQLAlchemy) -> int:
        """Insert a user with a random name and return its id."""
        return user_repo.add(self._rng.choice(self._sources.names))

    def associate_user_with_tag(
        self,
        user_tag_repo: UserTagRepositorySQLAlchemy,
        user_id: int,
        tag_id: int,
        rank: int = 0,
    ) -> None:
        user_tag_repo.add(user_id=user_id, tag_id=tag_id, rank=rank)

    @staticmethod
    def generate_file_name(now: datetime) -> str:
        return now.strftime("%Y%m%d-%H%M%S") + FILENAME_SUFFIX
