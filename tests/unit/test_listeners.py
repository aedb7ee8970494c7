"""Tests for ActionListener class."""

import logging

import pytest
from fieldmask import ActionListener, Node


class RecordingListener(ActionListener):
    """Listener remembering every forwarded event."""

    def __init__(self, action_filter=None):
        super().__init__(action_filter)
        self.events = []

    def action_performed(self, action, record):
        self.events.append(("post", action, dict(record)))

    def pre_action_performed(self, action, record):
        self.events.append(("pre", action, dict(record)))


class TestActionListenerFilter:
    """Tests for action filtering."""

    def test_empty_filter_listens_to_all(self) -> None:
        """Test that no filter forwards every action."""
        listener = RecordingListener()
        listener.notify("save", {"id": 1})
        listener.notify("delete", {"id": 1})

        assert [e[1] for e in listener.events] == ["save", "delete"]

    def test_filter_limits_actions(self) -> None:
        """Test that only filtered actions are forwarded."""
        listener = RecordingListener(["update"])
        listener.notify("save", {"id": 1})
        listener.notify("update", {"id": 1})
        listener.pre_notify("delete", {"id": 1})

        assert listener.events == [("post", "update", {"id": 1})]

    def test_pre_notify(self) -> None:
        """Test that pre-notifications reach the pre hook."""
        listener = RecordingListener()
        listener.pre_notify("save", {"id": 2})

        assert listener.events == [("pre", "save", {"id": 2})]

    def test_default_hooks_do_nothing(self) -> None:
        """Test that the base listener accepts events silently."""
        listener = ActionListener()
        listener.notify("save", {"id": 1})
        listener.pre_notify("save", {"id": 1})

        assert listener.node is None


class TestActionListenerLogging:
    """Tests for debug logging of dispatched events."""

    def test_logs_node_and_primary_key(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that dispatch is logged with node type and key."""
        node = Node("vehicle", module="fleet")
        listener = RecordingListener()
        node.add_listener(listener)

        with caplog.at_level(logging.DEBUG, logger="fieldmask.listeners"):
            listener.notify("save", {"id": 7})

        assert "Action save performed on fleet.vehicle (id='7')" in caplog.text
