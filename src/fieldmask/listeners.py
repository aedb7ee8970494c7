"""Action listeners for node events.

Subclass ActionListener and override action_performed() and/or
pre_action_performed(). Listeners added with Node.add_listener() are
notified before and after each action on a record.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fieldmask.node import Node

logger = logging.getLogger(__name__)


class ActionListener:
    """Base class for handling node action events.

    Example:
        >>> class AuditListener(ActionListener):
        ...     def action_performed(self, action, record):
        ...         audit_log.append((action, record["id"]))
        >>>
        >>> node.add_listener(AuditListener(["save", "update"]))
    """

    def __init__(self, action_filter: Iterable[str] | None = None):
        """
        Initialize listener.

        Args:
            action_filter: Actions to listen to; empty means all actions
        """
        self.action_filter: list[str] = list(action_filter or [])
        self.node: Node | None = None

    def set_node(self, node: Node) -> None:
        """Set the owning node (done by Node.add_listener)."""
        self.node = node

    def listens_to(self, action: str) -> bool:
        return not self.action_filter or action in self.action_filter

    def notify(self, action: str, record: dict[str, Any]) -> None:
        """Forward an action that was performed, if it passes the filter."""
        if self.listens_to(action):
            logger.debug(f"Action {action} performed on {self._describe(record)}")
            self.action_performed(action, record)

    def pre_notify(self, action: str, record: dict[str, Any]) -> None:
        """Forward an action about to be performed, if it passes the filter.

        The record is passed by reference; pre-action hooks may modify it.
        """
        if self.listens_to(action):
            logger.debug(f"Action {action} to be performed on {self._describe(record)}")
            self.pre_action_performed(action, record)

    def action_performed(self, action: str, record: dict[str, Any]) -> None:
        """Override to handle a performed action."""
        pass

    def pre_action_performed(self, action: str, record: dict[str, Any]) -> None:
        """Override to handle an action about to be performed."""
        pass

    def _describe(self, record: dict[str, Any]) -> str:
        if self.node is None:
            return "<no node>"
        return f"{self.node.node_type()} ({self.node.primary_key(record)})"
