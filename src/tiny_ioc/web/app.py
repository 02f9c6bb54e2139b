"""FastAPI application exposing the todo example."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, HTTPException, Request, status as http_status
from pydantic import BaseModel, Field

from tiny_ioc.core import AppSettings, Container, load_app_settings
from tiny_ioc.todo import AddTodoController, Todo, TodoService, build_container

LOGGER = logging.getLogger(__name__)


class TodoCreate(BaseModel):
    """Request body for creating a todo."""

    name: str = Field(min_length=1, description="Todo description")


class TodoOut(BaseModel):
    """Serialized todo."""

    id: str
    name: str

    @classmethod
    def from_todo(cls, todo: Todo) -> TodoOut:
        return cls(id=todo.id, name=todo.name)


def get_container(request: Request) -> Container:
    """Return the container bound to the running application."""
    return request.app.state.container


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Build the FastAPI app with its own container."""
    settings = settings or load_app_settings()
    app = FastAPI(title="tiny-ioc todos")
    app.state.container = build_container(settings)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/todos", response_model=list[TodoOut])
    def list_todos(container: Container = Depends(get_container)) -> list[TodoOut]:
        service: TodoService = container.resolve(TodoService)
        return [TodoOut.from_todo(todo) for todo in service.list_todos()]

    @app.post(
        "/todos",
        response_model=TodoOut,
        status_code=http_status.HTTP_201_CREATED,
    )
    def add_todo(
        payload: TodoCreate, container: Container = Depends(get_container)
    ) -> TodoOut:
        controller: AddTodoController = container.resolve(AddTodoController)
        try:
            todo = controller.handle(payload.name)
        except ValueError as exc:
            raise HTTPException(
                status_code=422,
                detail=str(exc),
            ) from exc
        LOGGER.info("Added todo %s", todo.id)
        return TodoOut.from_todo(todo)

    return app


__all__ = ["TodoCreate", "TodoOut", "create_app", "get_container"]
