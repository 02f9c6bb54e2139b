"""Example todo application built on the container."""

from .bootstrap import build_container
from .services import (
    ID_GENERATOR,
    TODO_COLLECTION,
    AddTodoController,
    IdGenerator,
    Todo,
    TodoRepository,
    TodoService,
    UuidIdGenerator,
)

__all__ = [
    "ID_GENERATOR",
    "TODO_COLLECTION",
    "AddTodoController",
    "IdGenerator",
    "Todo",
    "TodoRepository",
    "TodoService",
    "UuidIdGenerator",
    "build_container",
]
