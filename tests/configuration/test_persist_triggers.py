"""Tests for persist-trigger bindings and the persist-request capability."""

from unittest.mock import patch

import pytest

from statekeep.configuration.events import event
from statekeep.configuration.tracking import TrackingConfiguration
from statekeep.errors import BindingError


class Editor:
    changed = event()

    def __init__(self):
        self.text = ""
        self.not_an_event = 5


class SelfSavingEditor:
    persist_requested = event()

    def __init__(self):
        self.text = ""


class Signal:
    """connect/disconnect style signal, as exposed by Qt or blinker."""

    def __init__(self):
        self.receivers = []

    def connect(self, receiver):
        self.receivers.append(receiver)

    def disconnect(self, receiver):
        self.receivers.remove(receiver)

    def emit(self, *args):
        for receiver in list(self.receivers):
            receiver(*args)


class Document:
    def __init__(self):
        self.saved = Signal()


class TestRegisterPersistTrigger:
    """Test trigger registration and gating."""

    def setup_method(self):
        self.editor = Editor()

    def test_trigger_gated_until_first_apply(self, store):
        """Firings before the first apply do not persist."""
        configuration = TrackingConfiguration(self.editor, store).add_property("text")
        configuration.register_persist_trigger("changed")

        with patch.object(configuration, "persist", wraps=configuration.persist) as persist:
            self.editor.changed.fire()
            assert persist.call_count == 0

            configuration.apply()
            self.editor.changed.fire()
            assert persist.call_count == 1

            self.editor.changed.fire()
            assert persist.call_count == 2

    def test_trigger_persists_current_values(self, store):
        configuration = TrackingConfiguration(self.editor, store).add_property("text")
        configuration.register_persist_trigger("changed")
        self.editor.text = "draft"

        self.editor.changed.fire()
        assert store.keys() == []

        configuration.apply()
        self.editor.text = "final"
        self.editor.changed.fire()

        assert store.retrieve("Editor_.text") == "final"

    def test_trigger_ignores_event_arguments(self, store):
        """Handlers tolerate any positional and keyword arguments."""
        configuration = TrackingConfiguration(self.editor, store).add_property("text")
        configuration.register_persist_trigger("changed").apply()

        self.editor.changed.fire(self.editor, "text", old="", new="x")

        assert store.contains_key("Editor_.text")

    def test_trigger_on_other_source(self, store):
        """A trigger can listen to an object other than the target."""
        document = Document()
        configuration = TrackingConfiguration(self.editor, store).add_property("text")
        configuration.register_persist_trigger("saved", document)
        configuration.apply()

        document.saved.emit("path.txt")

        assert store.contains_key("Editor_.text")
        assert configuration.trigger_subscriptions[0].source is document

    def test_missing_event_raises(self, store):
        configuration = TrackingConfiguration(self.editor, store)

        with pytest.raises(BindingError) as exc_info:
            configuration.register_persist_trigger("closed")

        assert exc_info.value.member_name == "closed"

    def test_non_event_attribute_raises(self, store):
        configuration = TrackingConfiguration(self.editor, store)

        with pytest.raises(BindingError):
            configuration.register_persist_trigger("not_an_event")

    def test_returns_configuration(self, store):
        configuration = TrackingConfiguration(self.editor, store)

        assert configuration.register_persist_trigger("changed") is configuration


class TestClearPersistTriggers:
    """Test tearing trigger subscriptions down."""

    def test_clear_detaches_event_handlers(self, store):
        editor = Editor()
        configuration = TrackingConfiguration(editor, store).add_property("text")
        configuration.register_persist_trigger("changed").apply()
        assert len(editor.changed) == 1

        configuration.clear_persist_triggers()
        editor.changed.fire()

        assert len(editor.changed) == 0
        assert configuration.trigger_subscriptions == ()
        assert store.keys() == []

    def test_clear_detaches_signal_receivers(self, store):
        editor = Editor()
        document = Document()
        configuration = TrackingConfiguration(editor, store)
        configuration.register_persist_trigger("saved", document)

        configuration.clear_persist_triggers()

        assert document.saved.receivers == []


class TestPersistRequested:
    """Test targets that request their own persistence."""

    def test_persist_requested_persists_immediately(self, store):
        """The persist-request event is honoured even before apply."""
        editor = SelfSavingEditor()
        configuration = TrackingConfiguration(editor, store).add_property("text")
        editor.text = "autosaved"

        editor.persist_requested.fire()

        assert store.retrieve("SelfSavingEditor_.text") == "autosaved"
        assert len(configuration.trigger_subscriptions) == 1

    def test_targets_without_capability_get_no_subscription(self, store):
        configuration = TrackingConfiguration(Editor(), store)

        assert configuration.trigger_subscriptions == ()
