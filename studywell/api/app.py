"""FastAPI web application for StudyWell."""

import logging
from typing import Any, Dict, Optional
from fastapi import Body, Depends, FastAPI, Query, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from studywell.api.dependencies import (
    get_default_settings,
    get_record_service,
    get_task_service,
    get_view_cache,
    get_weather_client,
)
from studywell.api.schemas import (
    DashboardResponse,
    HealthSubmitRequest,
    MoodSubmitRequest,
    ScoredTaskResponse,
    SnoozeRequest,
    TaskCreateRequest,
    TaskListResponse,
    TaskUpdateRequest,
)
from studywell.engine.civil_time import today_civil_date_string
from studywell.errors import NotFound, StorageFailure, ValidationError
from studywell.integrations.weather import WeatherClient, WeatherError
from studywell.models.constants import DASHBOARD_TOP_N, HISTORY_DAYS
from studywell.models.settings import DisplaySettings
from studywell.models.task import Task
from studywell.services.record_service import RecordService
from studywell.services.task_service import SORT_DEFAULT, TaskService
from studywell.services.view_cache import DASHBOARD_VIEW, TASK_LIST_VIEW, ViewCache

logger = logging.getLogger(__name__)

VERSION = "0.1.0"

# Initialize FastAPI app
app = FastAPI(
    title="StudyWell API",
    description="Tasks, health and mood journaling, and what to work on today",
    version=VERSION,
)


def _describe_errors(errors) -> str:
    return "; ".join(f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in errors)


# Error mapping
@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": f"Invalid request body: {_describe_errors(exc.errors())}"},
    )


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)})


@app.exception_handler(StorageFailure)
async def storage_failure_handler(request: Request, exc: StorageFailure):
    logger.error(f"{request.method} {request.url.path} failed: {exc} ({type(exc.__cause__).__name__})")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "Internal Server Error"})


@app.get("/status")
async def service_status():
    """Service status endpoint."""
    return {"status": "healthy", "version": VERSION}


# Health and mood journal
@app.post("/health", status_code=status.HTTP_201_CREATED)
def submit_health(
    body: HealthSubmitRequest,
    records: RecordService = Depends(get_record_service),
):
    """Record today's (or `dayJst`'s) condition; resubmitting overwrites the day."""
    record = records.submit_health(body.condition, note=body.note, day=body.day_jst)
    return {"ok": True, "created": {"id": record.id, "date": record.date, "condition": record.condition}}


@app.post("/mood", status_code=status.HTTP_201_CREATED)
def submit_mood(
    body: MoodSubmitRequest,
    records: RecordService = Depends(get_record_service),
):
    """Append a mood entry."""
    entry = records.submit_mood(body.mood, note=body.note)
    return {"ok": True, "created": {"id": entry.id, "mood": entry.mood, "at": entry.at}}


@app.get("/history")
def view_history(
    days: int = Query(HISTORY_DAYS, ge=1, le=365),
    records: RecordService = Depends(get_record_service),
):
    """Per-day merged health/mood history with a trailing 7-day summary."""
    history = records.history(limit_days=days)
    return {
        "today": history["today"],
        "rows": [row.model_dump(by_alias=True, mode="json") for row in history["rows"]],
        "summary": history["summary"].model_dump(by_alias=True, mode="json"),
    }


# Tasks
@app.post("/tasks", response_model=Task, status_code=status.HTTP_201_CREATED)
def create_task(
    body: TaskCreateRequest,
    tasks: TaskService = Depends(get_task_service),
):
    """Create a task."""
    return tasks.create(
        title=body.title,
        description=body.description,
        due_date=body.due_date,
        estimate_min=body.estimate_min,
        importance=body.importance,
    )


@app.get("/tasks", response_model=TaskListResponse)
def list_tasks(
    status_filter: Optional[str] = Query(None, alias="status", description="open or done"),
    sort: str = Query(SORT_DEFAULT, description="default or score"),
    tasks: TaskService = Depends(get_task_service),
    views: ViewCache = Depends(get_view_cache),
):
    """The task list view."""
    def render() -> TaskListResponse:
        listed = tasks.list(status=status_filter, sort=sort)
        return TaskListResponse(tasks=listed, count=len(listed))

    return views.get_or_render(TASK_LIST_VIEW, render, variant=f"{status_filter or 'all'}/{sort}")


@app.get("/tasks/{task_id}", response_model=Task)
def get_task(task_id: str, tasks: TaskService = Depends(get_task_service)):
    return tasks.get(task_id)


@app.put("/tasks/{task_id}", response_model=Task)
def update_task(
    task_id: str,
    body: TaskUpdateRequest,
    tasks: TaskService = Depends(get_task_service),
):
    """Replace a task. `title` and `importance` are required."""
    return tasks.update(
        task_id,
        title=body.title,
        importance=body.importance,
        description=body.description,
        due_date=body.due_date,
        estimate_min=body.estimate_min,
        is_done=body.is_done,
    )


@app.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: str, tasks: TaskService = Depends(get_task_service)):
    tasks.delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.post("/tasks/{task_id}/done", status_code=status.HTTP_204_NO_CONTENT)
def complete_task(task_id: str, tasks: TaskService = Depends(get_task_service)):
    tasks.mark_done(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.post("/tasks/{task_id}/snooze", status_code=status.HTTP_204_NO_CONTENT)
def snooze_task(
    task_id: str,
    body: Optional[SnoozeRequest] = Body(None),
    tasks: TaskService = Depends(get_task_service),
):
    """Push the due date forward by `days` (default 1, clamped to 1-30)."""
    tasks.snooze(task_id, days=body.days if body else None)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Dashboard
@app.get("/dashboard", response_model=DashboardResponse)
def dashboard(
    tasks: TaskService = Depends(get_task_service),
    views: ViewCache = Depends(get_view_cache),
):
    """Top open tasks by score, with today's condition and mood."""
    def render() -> DashboardResponse:
        condition, mood = tasks.today_inputs()
        top = tasks.top_by_score(limit=DASHBOARD_TOP_N)
        return DashboardResponse(
            today=today_civil_date_string(),
            condition=condition,
            mood=mood,
            tasks=[
                ScoredTaskResponse(
                    task=scored.task,
                    score=scored.score,
                    health_coef=scored.health_coef,
                    mood_coef=scored.mood_coef,
                    due_coef=scored.due_coef,
                    due_status=scored.due_status,
                )
                for scored in top
            ],
        )

    return views.get_or_render(DASHBOARD_VIEW, render)


# Weather
@app.get("/weather")
def weather(
    lat: Optional[str] = Query(None),
    lon: Optional[str] = Query(None),
    client: WeatherClient = Depends(get_weather_client),
):
    """Forecast and place label for a location (Hiroshima when omitted)."""
    try:
        return client.lookup(lat, lon)
    except WeatherError as e:
        logger.error(f"Weather lookup failed: {e}")
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"ok": False, "error": str(e)})


# Display settings
@app.get("/settings", response_model=DisplaySettings)
def get_settings(defaults: DisplaySettings = Depends(get_default_settings)):
    return defaults


@app.patch("/settings")
def merge_settings(
    patch: Dict[str, Any] = Body(...),
    defaults: DisplaySettings = Depends(get_default_settings),
):
    """Merge a client override onto the server defaults and return the result."""
    try:
        merged = defaults.merge(patch)
    except PydanticValidationError as e:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": f"Invalid settings: {_describe_errors(e.errors())}"})
    return {
        **merged.model_dump(by_alias=True, mode="json"),
        "highlightBackground": merged.highlight_background(),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
