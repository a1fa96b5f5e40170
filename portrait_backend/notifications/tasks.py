"""
Tâches post-commit: exécutées après la réponse HTTP, chacune dans sa propre barrière d'erreur.
L'échec d'une tâche est journalisé et n'affecte ni les autres tâches ni la réservation.
"""
import logging
from typing import Any, Callable, List, Optional, Tuple

from fastapi import BackgroundTasks

logger = logging.getLogger(__name__)


def run_guarded(name: str, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
    try:
        fn(*args, **kwargs)
    except Exception:
        logger.exception("post-commit task %s failed", name)


class PostCommitTasks:
    def __init__(self) -> None:
        self._tasks: List[Tuple[str, Callable[..., Any], tuple, dict]] = []

    def add(self, name: str, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        self._tasks.append((name, fn, args, kwargs))

    @property
    def names(self) -> List[str]:
        return [name for name, _, _, _ in self._tasks]

    def __len__(self) -> int:
        return len(self._tasks)

    def dispatch(self, background: Optional[BackgroundTasks] = None) -> None:
        """
        Planifie les tâches sur BackgroundTasks (après la réponse) ou, sans
        BackgroundTasks, les exécute immédiatement dans l'ordre d'ajout.
        """
        for name, fn, args, kwargs in self._tasks:
            if background is not None:
                background.add_task(run_guarded, name, fn, *args, **kwargs)
            else:
                run_guarded(name, fn, *args, **kwargs)
        self._tasks = []
