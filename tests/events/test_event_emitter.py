"""
Tests for the event system.
"""

from unittest.mock import MagicMock

from hitstand.events import EventEmitter, EventBus, EngineEventType, EventPriority


def test_on_with_string_event_type():
    """Test subscribing to an event with a string event type."""
    emitter = EventEmitter()
    callback = MagicMock()

    unsubscribe = emitter.on("test_event", callback)

    test_data = {"value": "test"}
    emitter.emit("test_event", test_data)
    callback.assert_called_once_with(test_data)

    unsubscribe()
    emitter.emit("test_event", {"value": "test2"})
    callback.assert_called_once()


def test_on_with_enum_event_type():
    """Enum and name subscriptions refer to the same event."""
    emitter = EventEmitter()
    callback = MagicMock()

    emitter.on(EngineEventType.CARD_DEALT, callback)
    emitter.emit("CARD_DEALT", {"card": "A of ♠"})
    emitter.emit(EngineEventType.CARD_DEALT, {"card": "2 of ♠"})

    assert callback.call_count == 2


def test_priority_order():
    """Higher priority handlers run first."""
    emitter = EventEmitter()
    order = []

    emitter.on("evt", lambda data: order.append("low"), EventPriority.LOW)
    emitter.on("evt", lambda data: order.append("critical"), EventPriority.CRITICAL)
    emitter.on("evt", lambda data: order.append("normal"))
    emitter.on("evt", lambda data: order.append("high"), EventPriority.HIGH)

    emitter.emit("evt", {})
    assert order == ["critical", "high", "normal", "low"]


def test_once():
    emitter = EventEmitter()
    callback = MagicMock()

    emitter.once(EngineEventType.ROUND_ENDED, callback)
    emitter.emit(EngineEventType.ROUND_ENDED, {"result": "PUSH"})
    emitter.emit(EngineEventType.ROUND_ENDED, {"result": "PUSH"})

    callback.assert_called_once_with({"result": "PUSH"})


def test_on_any():
    emitter = EventEmitter()
    callback = MagicMock()

    unsubscribe = emitter.on_any(callback)
    emitter.emit(EngineEventType.ROUND_STARTED, {"deck_remaining": 48})
    callback.assert_called_once_with(("ROUND_STARTED", {"deck_remaining": 48}))

    unsubscribe()
    emitter.emit(EngineEventType.ROUND_STARTED, {})
    callback.assert_called_once()


def test_failing_handler_does_not_stop_others(caplog):
    emitter = EventEmitter()
    good = MagicMock()

    def bad(data):
        raise RuntimeError("boom")

    emitter.on("evt", bad, EventPriority.HIGH)
    emitter.on("evt", good)

    emitter.emit("evt", {"x": 1})

    good.assert_called_once_with({"x": 1})
    assert "Error in event handler for evt" in caplog.text


def test_remove_all_listeners():
    emitter = EventEmitter()
    first = MagicMock()
    second = MagicMock()
    everything = MagicMock()

    emitter.on("a", first)
    emitter.on("b", second)
    emitter.on_any(everything)

    emitter.remove_all_listeners("a")
    emitter.emit("a", {})
    emitter.emit("b", {})
    first.assert_not_called()
    second.assert_called_once()

    emitter.remove_all_listeners()
    emitter.emit("b", {})
    second.assert_called_once()
    assert everything.call_count == 2


def test_event_bus_singleton():
    assert EventBus.get_instance() is EventBus.get_instance()
    assert isinstance(EventBus.get_instance(), EventEmitter)
