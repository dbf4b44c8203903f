"""FastAPI web application for duewatch."""

import logging
import time
from datetime import date, datetime
from typing import List, Optional, Union
from fastapi import FastAPI
from pydantic import BaseModel, Field

from duewatch import __version__
from duewatch.models.task import Task
from duewatch.engine.dates import to_calendar_date
from duewatch.engine.overdue import classify_task, overdue_label, should_prompt_archive

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="duewatch API",
    description="Overdue status and severity for personal task lists",
    version=__version__,
)


# Request/response models
class TimeResponse(BaseModel):
    """Response for the time authority endpoint."""
    now: int = Field(..., description="Current instant as epoch milliseconds")


class OverdueRequest(BaseModel):
    """Request for overdue evaluation."""
    now: Union[datetime, date] = Field(..., description="Resolved current time for the session")
    tasks: List[Task] = Field(default_factory=list)


class TaskOverdueResult(BaseModel):
    """Overdue evaluation of one task, shaped for rendering."""
    task_id: str
    is_overdue: bool
    is_severe: bool
    days_overdue: Optional[int] = None
    label: Optional[str] = Field(None, description="Text indicator (null when not overdue)")
    archive_prompt: bool = Field(False, description="Whether to offer archiving the task")


class OverdueResponse(BaseModel):
    """Response for overdue evaluation."""
    now: date
    results: List[TaskOverdueResult]


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/time", response_model=TimeResponse)
async def current_time():
    """Time authority endpoint: current instant as epoch milliseconds."""
    return TimeResponse(now=int(time.time() * 1000))


@app.post("/overdue", response_model=OverdueResponse)
async def evaluate_overdue(request: OverdueRequest):
    """Classify tasks as overdue relative to the supplied "now"."""
    today = to_calendar_date(request.now)

    results = []
    for task in request.tasks:
        classification = classify_task(task, today)
        results.append(
            TaskOverdueResult(
                task_id=task.id,
                is_overdue=classification.is_overdue,
                is_severe=classification.is_severe,
                days_overdue=classification.days_overdue,
                label=overdue_label(classification),
                archive_prompt=should_prompt_archive(classification),
            )
        )

    overdue_count = sum(1 for r in results if r.is_overdue)
    logger.debug(f"Evaluated {len(results)} tasks for {today}: {overdue_count} overdue")
    return OverdueResponse(now=today, results=results)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
