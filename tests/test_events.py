import pytest

from bikeledger.events import EventHub, NoSuchEventError, NoSuchListenerError, InvalidHandlerError, EventList


class TestException(Exception):
    pass


class ExampleEvents(EventList):

    @staticmethod
    def something_happened(argument):
        """An example event."""


class SecondExampleEvents(EventList):

    @staticmethod
    def something_else_happened(argument):
        """Another event."""


class MethodEvents(EventList):

    def two_things_happened(self, first, second):
        """An event declared as a plain function."""


class TestEventHub:

    @staticmethod
    def handler(argument):
        pass

    @staticmethod
    def invalid_handler():
        pass

    def test_event_list_in_hub(self):
        """Assert that you can check the existence of an event list on a hub."""
        hub = EventHub(ExampleEvents)
        assert ExampleEvents in hub
        assert SecondExampleEvents not in hub

    def test_event_in_hub(self):
        """Assert that you can check the existence of an event on an hub."""
        hub = EventHub(ExampleEvents)
        assert ExampleEvents.something_happened in hub
        assert SecondExampleEvents.something_else_happened not in hub

    def test_add_events(self):
        hub = EventHub(ExampleEvents)
        hub.add_events(SecondExampleEvents)
        assert SecondExampleEvents in hub
        assert SecondExampleEvents.something_else_happened in hub

    def test_missing_event(self):
        """Assert that getting a non-existent event on an event list raises an error."""
        with pytest.raises(AttributeError):
            ExampleEvents.bad_event

    def test_event_on_hub(self):
        """Assert that an event can be accessed through the hub."""
        hub = EventHub(ExampleEvents)
        assert hub.something_happened.event == ExampleEvents.something_happened

    def test_missing_event_on_hub(self):
        """Assert that getting a non-existent event on a hub raises an error."""
        hub = EventHub()
        with pytest.raises(NoSuchEventError):
            hub.bad_event

    def test_subscribe_to_event(self):
        """Assert that a handler can be registered on a hub's event."""
        hub = EventHub(ExampleEvents)
        assert sum((len(l) for l in hub._listeners.values()), 0) == 0
        hub.subscribe(ExampleEvents.something_happened, self.handler)
        assert sum((len(l) for l in hub._listeners.values()), 0) != 0

    def test_subscribe_to_missing_event(self):
        hub = EventHub(ExampleEvents)
        with pytest.raises(NoSuchEventError):
            hub.subscribe(SecondExampleEvents.something_else_happened, self.handler)

    def test_subscriber_has_similar_signature(self):
        """Assert that a subscriber to an event must have a similar signature."""
        hub = EventHub(ExampleEvents)
        with pytest.raises(InvalidHandlerError):
            hub.subscribe(ExampleEvents.something_happened, self.invalid_handler)

    def test_method_event_signature(self):
        """Assert that the self of an event declared as a method is not part of its signature."""
        hub = EventHub(MethodEvents)
        hub.subscribe(MethodEvents.two_things_happened, lambda first, second: None)
        with pytest.raises(InvalidHandlerError):
            hub.subscribe(MethodEvents.two_things_happened, lambda first: None)

    def test_variadic_handler(self):
        hub = EventHub(MethodEvents)
        received = []
        hub.subscribe(MethodEvents.two_things_happened, lambda *args: received.append(args))
        hub.emit(MethodEvents.two_things_happened, 1, 2)
        assert received == [(1, 2)]

    def test_subscribe_to_event_through_hub(self):
        """Assert that an event can also be referenced through the hub."""
        hub = EventHub(ExampleEvents)
        assert sum((len(l) for l in hub._listeners.values()), 0) == 0
        hub.subscribe(hub.something_happened, self.handler)
        assert sum((len(l) for l in hub._listeners.values()), 0) != 0

    def test_unsubscribe_from_event(self):
        """Assert that a handler can be unsubscribed from an event."""
        hub = EventHub(ExampleEvents)
        hub.subscribe(hub.something_happened, self.handler)
        hub.unsubscribe(hub.something_happened, self.handler)
        assert hub._listeners[ExampleEvents.something_happened] == []

    def test_bad_unsubscribe(self):
        """Assert that unsubscribing a handler that isn't registered fails."""
        hub = EventHub()
        with pytest.raises(NoSuchListenerError):
            hub.unsubscribe(ExampleEvents.something_happened, self.handler)

    def test_trigger_event(self):
        hub = EventHub(ExampleEvents)

        def raise_listener(argument):
            raise TestException("This runs!")

        with pytest.raises(TestException):
            hub.subscribe(ExampleEvents.something_happened, raise_listener)
            hub.emit(ExampleEvents.something_happened, argument="test")

    def test_handlers_called_in_order(self):
        hub = EventHub(ExampleEvents)
        received = []
        hub.subscribe(ExampleEvents.something_happened, lambda argument: received.append(("first", argument)))
        hub.subscribe(ExampleEvents.something_happened, lambda argument: received.append(("second", argument)))
        hub.emit(ExampleEvents.something_happened, "test")
        assert received == [("first", "test"), ("second", "test")]

    def test_subscribe_to_event_natural_syntax(self):
        hub = EventHub(ExampleEvents)
        hub.something_happened += self.handler
        assert hub._listeners[ExampleEvents.something_happened] == [self.handler]

    def test_unsubscribe_to_event_natural_syntax(self):
        hub = EventHub(ExampleEvents)
        hub.subscribe(ExampleEvents.something_happened, self.handler)
        hub.something_happened -= self.handler
        assert hub._listeners[ExampleEvents.something_happened] == []

    def test_trigger_event_natural_syntax(self):
        """Assert that events can be triggered with the natural syntax."""

        def raise_listener(argument):
            raise TestException("This runs!")

        hub = EventHub(ExampleEvents)
        hub.something_happened += raise_listener
        with pytest.raises(TestException):
            hub.something_happened("test")
