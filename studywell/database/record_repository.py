"""Repositories for the health and mood journals."""

import logging
import uuid
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError

from studywell.models.health import DailyHealthRecord, MoodLogEntry
from studywell.database.models import DailyHealthDB, MoodLogDB

logger = logging.getLogger(__name__)


class HealthRepository:
    """Repository for DailyHealthRecord, keyed by the civil-day instant."""

    def __init__(self, db: Session):
        self.db = db

    def _find(self, day_key: datetime) -> Optional[DailyHealthDB]:
        return self.db.query(DailyHealthDB).filter(DailyHealthDB.date == day_key).first()

    def get_for_day(self, day_key: datetime) -> Optional[DailyHealthRecord]:
        record_db = self._find(day_key)
        return record_db.to_pydantic() if record_db else None

    def list_since(self, since_key: datetime) -> List[DailyHealthRecord]:
        """Records on or after the given day key, newest first."""
        records_db = self.db.query(DailyHealthDB).filter(
            DailyHealthDB.date >= since_key,
        ).order_by(desc(DailyHealthDB.date)).all()
        return [record_db.to_pydantic() for record_db in records_db]

    def upsert(self, day_key: datetime, condition: int, note: Optional[str]) -> DailyHealthRecord:
        """Create or overwrite the record for a day.

        A concurrent insert for the same day loses on the unique `date`
        constraint; that case is retried once as an overwrite.
        """
        try:
            return self._upsert_once(day_key, condition, note)
        except IntegrityError:
            logger.debug(f"Health record for {day_key.isoformat()} was created concurrently; retrying as update")
            return self._upsert_once(day_key, condition, note)

    def _upsert_once(self, day_key: datetime, condition: int, note: Optional[str]) -> DailyHealthRecord:
        now = datetime.utcnow()
        record_db = self._find(day_key)

        if record_db:
            record_db.condition = condition
            record_db.note = note
            record_db.updated_at = now
            action = "Updated"
        else:
            record_db = DailyHealthDB(
                id=str(uuid.uuid4()),
                date=day_key,
                condition=condition,
                note=note,
                created_at=now,
                updated_at=now,
            )
            self.db.add(record_db)
            action = "Created"

        try:
            self.db.commit()
            self.db.refresh(record_db)
            logger.debug(f"{action} health record {record_db.id} for {day_key.isoformat()}")
            return record_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to upsert health record for {day_key.isoformat()}: {type(e).__name__}: {str(e)}")
            raise


class MoodRepository:
    """Repository for MoodLogEntry (append-only)."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, mood: int, note: Optional[str], at: Optional[datetime] = None) -> MoodLogEntry:
        entry_db = MoodLogDB(
            id=str(uuid.uuid4()),
            at=at or datetime.utcnow(),
            mood=mood,
            note=note,
        )
        try:
            self.db.add(entry_db)
            self.db.commit()
            self.db.refresh(entry_db)
            logger.debug(f"Created mood entry {entry_db.id}: {mood}")
            return entry_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create mood entry: {type(e).__name__}: {str(e)}")
            raise

    def list_recent(self, limit: int) -> List[MoodLogEntry]:
        """Most recent entries, newest first."""
        entries_db = self.db.query(MoodLogDB).order_by(desc(MoodLogDB.at)).limit(limit).all()
        return [entry_db.to_pydantic() for entry_db in entries_db]

    def latest_since(self, since: datetime) -> Optional[MoodLogEntry]:
        """Newest entry recorded at or after `since`."""
        entry_db = self.db.query(MoodLogDB).filter(
            MoodLogDB.at >= since,
        ).order_by(desc(MoodLogDB.at)).first()
        return entry_db.to_pydantic() if entry_db else None
