"""Application services for StudyWell."""

from studywell.services.task_service import TaskService
from studywell.services.record_service import RecordService
from studywell.services.view_cache import ViewCache, DASHBOARD_VIEW, TASK_LIST_VIEW, TASK_VIEWS

__all__ = [
    "TaskService",
    "RecordService",
    "ViewCache",
    "DASHBOARD_VIEW",
    "TASK_LIST_VIEW",
    "TASK_VIEWS",
]
