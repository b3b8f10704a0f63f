# interfaces/api.py
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from application.use_cases import TaskUseCases
from schemas.task import TaskCreate, TaskResponse, TaskUpdate

router = APIRouter(prefix="/api/todos", tags=["todos"])


def get_use_cases(request: Request) -> TaskUseCases:
    return request.app.state.use_cases


@router.get("", response_model=List[TaskResponse])
def get_all_tasks(use_cases: TaskUseCases = Depends(get_use_cases)):
    return [TaskResponse.from_entity(task) for task in use_cases.get_all_tasks()]


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(task: TaskCreate, use_cases: TaskUseCases = Depends(get_use_cases)):
    return TaskResponse.from_entity(use_cases.create_task(task.text))


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(task_id: int, task: TaskUpdate, use_cases: TaskUseCases = Depends(get_use_cases)):
    return TaskResponse.from_entity(use_cases.update_task(task_id, **task.changes()))


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: int, use_cases: TaskUseCases = Depends(get_use_cases)):
    use_cases.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
