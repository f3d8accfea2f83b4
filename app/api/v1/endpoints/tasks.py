"""Task hierarchy API: thin routes delegating to the task repository."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from app.api.v1.dependencies import get_task_repo
from app.application.interfaces.repositories import ITaskRepository
from app.schemas.task import FinishTreeRequest, TaskRequest, TaskResponse

router = APIRouter()


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    repo: Annotated[ITaskRepository, Depends(get_task_repo)],
):
    """Return every root task with its subtasks."""
    forest = await repo.list_all()
    return [TaskResponse.from_result(t) for t in forest]


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: int,
    repo: Annotated[ITaskRepository, Depends(get_task_repo)],
):
    """Return one task with its whole subtree. 404 if absent."""
    task = await repo.get(task_id)
    return TaskResponse.from_result(task)


@router.post("", response_model=TaskResponse, status_code=201)
async def create_task(
    body: TaskRequest,
    response: Response,
    repo: Annotated[ITaskRepository, Depends(get_task_repo)],
):
    """Create a task. Body id is ignored; 400 if parentId does not exist."""
    created = await repo.create(body.to_entity(include_id=False))
    response.headers["Location"] = f"/api/v1/tasks/{created.id}"
    return TaskResponse.from_result(created)


@router.put("/{task_id}", status_code=204)
async def replace_task(
    task_id: int,
    body: TaskRequest,
    repo: Annotated[ITaskRepository, Depends(get_task_repo)],
) -> Response:
    """Full replace of a task. 400 on id mismatch or illegal status change, 404 if absent."""
    await repo.replace(task_id, body.to_entity())
    return Response(status_code=204)


@router.delete("/{task_id}", status_code=204)
async def delete_task(
    task_id: int,
    repo: Annotated[ITaskRepository, Depends(get_task_repo)],
) -> Response:
    """Delete a leaf task. 400 if it has subtasks, 404 if absent."""
    await repo.delete(task_id)
    return Response(status_code=204)


@router.patch("/finish-tree/{task_id}", status_code=204)
async def finish_task_tree(
    task_id: int,
    body: FinishTreeRequest,
    repo: Annotated[ITaskRepository, Depends(get_task_repo)],
) -> Response:
    """Complete a task and all its descendants atomically.

    400 when completionDate is missing, the body id differs from the URL,
    or any task in the subtree is not started or suspended; 404 if absent.
    """
    await repo.finish_subtree(task_id, body.completion_date, declared_id=body.id)
    return Response(status_code=204)
