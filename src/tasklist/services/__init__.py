"""Service layer for tasklist.

Services hold the application logic between the command-line front end and
the storage adapters:

- TaskStore: task collection, filters and the edit session
- TaskPersistence: whole-collection load/save under one key
- TaskListSession: load-on-start, save-on-change wiring
- ConfigService: configuration and backend selection
"""

from .persistence import TASKS_KEY, TaskPersistence
from .session_service import TaskListSession
from .task_store import TaskStore, generate_task_id

__all__ = [
    "TASKS_KEY",
    "TaskPersistence",
    "TaskListSession",
    "TaskStore",
    "generate_task_id",
]
