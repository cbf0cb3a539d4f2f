"""
Storage abstraction layer.
Provides a clean interface for data persistence that can be swapped out.
"""
from .interface import TaskRepository
from .schema import SchemaManager
from .task_repository import TaskStore

__all__ = [
    'TaskRepository',
    'SchemaManager',
    'TaskStore',
]
