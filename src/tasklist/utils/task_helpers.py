"""Task helper utilities."""

from tasklist.models import Task, TaskNotFoundError


def calculate_unique_suffixes(task_ids: list[str]) -> dict[str, str]:
    """
    Find the shortest suffix that uniquely identifies each task ID.

    Starts from length 1 and grows until unique among all IDs.

    Args:
        task_ids: List of full task IDs

    Returns:
        Dict mapping task_id -> shortest unique suffix
    """
    result = {}
    for task_id in task_ids:
        for length in range(1, len(task_id) + 1):
            suffix = task_id[-length:]
            conflicts = [
                tid for tid in task_ids if tid != task_id and tid.endswith(suffix)
            ]
            if not conflicts:
                result[task_id] = suffix
                break
        else:
            # One ID is a suffix of another; only the full ID is unambiguous
            result[task_id] = task_id
    return result


def resolve_task_id(tasks: list[Task], task_id_or_suffix: str) -> str:
    """
    Resolve a task ID or suffix to a full task ID.

    An exact ID match wins; otherwise the reference must be the suffix of
    exactly one task ID.

    Args:
        tasks: Tasks to search
        task_id_or_suffix: Full task ID or suffix to resolve

    Returns:
        The full task ID

    Raises:
        TaskNotFoundError: If no task matches
        ValueError: If the suffix matches more than one task
    """
    ref = task_id_or_suffix.strip()
    if not ref:
        raise TaskNotFoundError(task_id_or_suffix)

    for task in tasks:
        if task.id == ref:
            return task.id

    matches = [task for task in tasks if task.id.endswith(ref)]
    if not matches:
        raise TaskNotFoundError(ref)
    if len(matches) > 1:
        shown = ", ".join(
            f"'{task.text[:30]}' ({task.id})" for task in matches[:5]
        )
        raise ValueError(
            f"Suffix '{ref}' matches {len(matches)} tasks: {shown}. "
            "Use a longer suffix."
        )
    return matches[0].id
