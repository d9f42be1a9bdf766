"""Repository layer for task database operations."""

import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import asc, desc

from studywell.models.task import Task
from studywell.database.models import TaskDB

logger = logging.getLogger(__name__)


class TaskRepository:
    """Repository for Task database operations."""

    def __init__(self, db: Session):
        self.db = db

    def _commit(self, task_db: TaskDB, action: str) -> Task:
        try:
            self.db.commit()
            self.db.refresh(task_db)
            logger.debug(f"{action} task {task_db.id}: {task_db.title[:50]}")
            return task_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to {action.lower()} task {task_db.id}: {type(e).__name__}: {str(e)}")
            raise

    def _get_db(self, task_id: str) -> Optional[TaskDB]:
        return self.db.query(TaskDB).filter(TaskDB.id == task_id).first()

    def create(self, task: Task) -> Task:
        """Create a new task."""
        task_db = TaskDB.from_pydantic(task)
        self.db.add(task_db)
        return self._commit(task_db, "Created")

    def get(self, task_id: str) -> Optional[Task]:
        """Get task by ID."""
        task_db = self._get_db(task_id)
        return task_db.to_pydantic() if task_db else None

    def get_all(self, is_done: Optional[bool] = None) -> List[Task]:
        """Get tasks in list order: open first, earliest due first (no due date last), most important first."""
        query = self.db.query(TaskDB)
        if is_done is not None:
            query = query.filter(TaskDB.is_done.is_(is_done))
        tasks_db = query.order_by(
            asc(TaskDB.is_done),
            # NULL due dates sort after every real date on all backends.
            TaskDB.due_date.is_(None),
            asc(TaskDB.due_date),
            desc(TaskDB.importance),
            asc(TaskDB.created_at),
        ).all()
        return [task_db.to_pydantic() for task_db in tasks_db]

    def get_open(self) -> List[Task]:
        """Get all open tasks in creation order (oldest first)."""
        tasks_db = self.db.query(TaskDB).filter(
            TaskDB.is_done.is_(False),
        ).order_by(asc(TaskDB.created_at), asc(TaskDB.id)).all()
        return [task_db.to_pydantic() for task_db in tasks_db]

    def update(self, task: Task) -> Optional[Task]:
        """Replace the editable fields of an existing task. Returns None if it does not exist."""
        task_db = self._get_db(task.id)
        if not task_db:
            return None

        task_db.title = task.title
        task_db.description = task.description
        task_db.due_date = task.due_date
        task_db.estimate_min = task.estimate_min
        task_db.importance = task.importance
        task_db.is_done = task.is_done
        task_db.updated_at = task.updated_at
        return self._commit(task_db, "Updated")

    def mark_done(self, task_id: str) -> Optional[Task]:
        """Set is_done only. Returns None if the task does not exist."""
        task_db = self._get_db(task_id)
        if not task_db:
            return None
        task_db.is_done = True
        task_db.updated_at = datetime.utcnow()
        return self._commit(task_db, "Completed")

    def set_due_date(self, task_id: str, due_date: Optional[datetime]) -> Optional[Task]:
        """Change only the due date. Returns None if the task does not exist."""
        task_db = self._get_db(task_id)
        if not task_db:
            return None
        task_db.due_date = due_date
        task_db.updated_at = datetime.utcnow()
        return self._commit(task_db, "Rescheduled")

    def delete(self, task_id: str) -> bool:
        """Permanently delete a task by ID."""
        task_db = self._get_db(task_id)
        if not task_db:
            return False

        try:
            self.db.delete(task_db)
            self.db.commit()
            logger.debug(f"Deleted task {task_id}")
            return True
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to delete task {task_id}: {type(e).__name__}: {str(e)}")
            raise
