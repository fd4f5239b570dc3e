"""Observers for engine action events.

The engine reports every mutation to an ActionObserver instead of
printing. log_action is used when the caller passes none.
"""

import logging

from treeops.engine.models import ActionEvent, ActionObserver

logger = logging.getLogger(__name__)


def log_action(event: ActionEvent) -> None:
    """Write an action event as an INFO log record."""
    logger.info("%s", event.describe())


def ignore_action(event: ActionEvent) -> None:
    """Discard an action event."""
    _ = event


def resolve_observer(observer: ActionObserver | None) -> ActionObserver:
    """Return the given observer, or log_action if None."""
    return observer if observer is not None else log_action
