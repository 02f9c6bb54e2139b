"""Example todo services wired through the container."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Protocol

from tiny_ioc.core.tokens import Symbol, inject

TODO_COLLECTION = Symbol("TodoRegistry")
ID_GENERATOR = "ID_GENERATOR"


@dataclass(slots=True, frozen=True)
class Todo:
    """A single todo entry."""

    id: str
    name: str


class IdGenerator(Protocol):
    """Produces unique identifiers for new todos."""

    def generate(self) -> str:
        raise NotImplementedError


@dataclass(slots=True)
class UuidIdGenerator:
    """Generate random UUID based identifiers."""

    prefix: str = ""

    def generate(self) -> str:
        return f"{self.prefix}{uuid.uuid4()}"


@inject(TODO_COLLECTION, ID_GENERATOR)
class TodoRepository:
    """Stores todos in the shared in-memory collection."""

    def __init__(self, todo_collection: list[Todo], id_generator: IdGenerator) -> None:
        self.todo_collection = todo_collection
        self.id_generator = id_generator

    def add(self, name: str) -> Todo:
        todo = Todo(id=self.id_generator.generate(), name=name)
        self.todo_collection.append(todo)
        return todo

    def list_todos(self) -> list[Todo]:
        return list(self.todo_collection)


@inject(TodoRepository)
class TodoService:
    """Application service for adding and listing todos."""

    def __init__(self, repository: TodoRepository) -> None:
        self.repository = repository

    def add(self, name: str) -> Todo:
        """Store a new todo named ``name`` and return it."""
        return self.repository.add(name)

    def list_todos(self) -> list[Todo]:
        """Return every stored todo in insertion order."""
        return self.repository.list_todos()


@inject(TodoService)
class AddTodoController:
    """Entry point used by the CLI and web layer to add todos."""

    def __init__(self, service: TodoService) -> None:
        self.service = service

    def handle(self, name: str) -> Todo:
        """Validate ``name`` and add it as a new todo."""
        cleaned = name.strip()
        if not cleaned:
            raise ValueError("Todo name must not be empty")
        return self.service.add(cleaned)


__all__ = [
    "ID_GENERATOR",
    "TODO_COLLECTION",
    "AddTodoController",
    "IdGenerator",
    "Todo",
    "TodoRepository",
    "TodoService",
    "UuidIdGenerator",
]
