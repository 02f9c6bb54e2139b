"""Container wiring for the todo example."""

from __future__ import annotations

from tiny_ioc.core.config import AppSettings
from tiny_ioc.core.container import Container

from .services import (
    ID_GENERATOR,
    TODO_COLLECTION,
    AddTodoController,
    TodoRepository,
    TodoService,
    UuidIdGenerator,
)


def build_container(settings: AppSettings | None = None) -> Container:
    """Register every todo provider on a fresh container."""
    settings = settings or AppSettings()
    prefix = settings.todo.id_prefix
    return (
        Container(settings.container)
        .register(AddTodoController)
        .register(TodoService)
        .register(TodoRepository)
        .register_value(TODO_COLLECTION, [])
        .register(ID_GENERATOR, lambda: UuidIdGenerator(prefix=prefix))
    )


__all__ = ["build_container"]
