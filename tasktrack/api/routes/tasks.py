"""
Task routes.

Handlers decode the request, call the TaskRepository and serialize the
result. Repository errors are mapped to status codes by the exception
handlers in tasktrack.exceptions.handlers.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from tasktrack.models import Task, TaskPayload
from tasktrack.storage import TaskRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Tasks"])


def get_task_repository(request: Request) -> TaskRepository:
    """FastAPI dependency returning the repository the app was built with."""
    return request.app.state.task_repository


@router.post("/tasks", response_model=Task, status_code=201)
def create_task(
    payload: TaskPayload,
    repository: TaskRepository = Depends(get_task_repository),
):
    return repository.create(payload.to_task())


@router.get("/tasks", response_model=List[Task])
def get_all_tasks(repository: TaskRepository = Depends(get_task_repository)):
    return repository.get_all()


@router.get("/tasks/{task_id:int}", response_model=Task)
def get_task(
    task_id: int,
    repository: TaskRepository = Depends(get_task_repository),
):
    return repository.get_by_id(str(task_id))


@router.put("/tasks/{task_id:int}", response_model=Task)
def update_task(
    task_id: int,
    payload: TaskPayload,
    repository: TaskRepository = Depends(get_task_repository),
):
    """Replace title, description and status; the path id wins over any body id."""
    repository.update(payload.to_task(task_id=str(task_id)))
    return repository.get_by_id(str(task_id))


@router.delete("/tasks/{task_id:int}", status_code=204)
def delete_task(
    task_id: int,
    repository: TaskRepository = Depends(get_task_repository),
):
    repository.delete(str(task_id))
    return Response(status_code=204)
