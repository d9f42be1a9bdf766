"""FastAPI dependencies for StudyWell."""

from fastapi import Depends
from sqlalchemy.orm import Session

from studywell.database.database import get_db
from studywell.integrations.weather import WeatherClient
from studywell.models.settings import DisplaySettings, default_settings
from studywell.services.record_service import RecordService
from studywell.services.task_service import TaskService
from studywell.services.view_cache import ViewCache

# Process-wide cache of rendered views
view_cache = ViewCache()


def get_view_cache() -> ViewCache:
    return view_cache


def get_task_service(
    db: Session = Depends(get_db),
    views: ViewCache = Depends(get_view_cache),
) -> TaskService:
    return TaskService(db, views)


def get_record_service(
    db: Session = Depends(get_db),
    views: ViewCache = Depends(get_view_cache),
) -> RecordService:
    return RecordService(db, views)


def get_weather_client() -> WeatherClient:
    return WeatherClient()


def get_default_settings() -> DisplaySettings:
    return default_settings()
