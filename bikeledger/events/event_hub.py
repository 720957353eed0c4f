"""
Event Hub
---------

A hub routes emitted events to the handlers subscribed to them.
Handlers are called synchronously, in the order they subscribed.
"""

from inspect import signature, Parameter
from typing import Callable, Dict, List, Set, Type, Union

from bikeledger.events.event_list import EventList
from bikeledger.events.exceptions import NoSuchEventError, NoSuchListenerError, InvalidHandlerError

POSITIONAL = (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD)


class BoundEvent:
    """
    An event accessed through a hub, allowing the natural syntax:

    >>> hub.something_happened += handler
    >>> hub.something_happened("argument")
    >>> hub.something_happened -= handler
    """

    def __init__(self, hub: 'EventHub', event: Callable):
        self.hub = hub
        self.event = event

    def __iadd__(self, handler: Callable):
        self.hub.subscribe(self.event, handler)
        return self

    def __isub__(self, handler: Callable):
        self.hub.unsubscribe(self.event, handler)
        return self

    def __call__(self, *args, **kwargs):
        self.hub.emit(self.event, *args, **kwargs)


class EventHub:

    def __init__(self, *event_lists: Type[EventList]):
        self._event_lists: Set[Type[EventList]] = set()
        self._listeners: Dict[Callable, List[Callable]] = {}
        self._arguments: Dict[Callable, int] = {}
        self.add_events(*event_lists)

    def add_events(self, *event_lists: Type[EventList]):
        """Adds the events of the given lists to the hub."""
        for event_list in event_lists:
            self._event_lists.add(event_list)
            for event in event_list.events():
                self._listeners.setdefault(event, [])
                self._arguments[event] = len(event_list.arguments(event))

    def subscribe(self, event: Union[Callable, BoundEvent], handler: Callable):
        """
        Subscribes a handler to an event.

        :raises NoSuchEventError: If the event is not on this hub.
        :raises InvalidHandlerError: If the handler does not accept the event's arguments.
        """
        event = self._resolve(event)
        if event not in self._listeners:
            raise NoSuchEventError(f"{event.__name__} is not registered on this hub.")

        parameters = list(signature(handler).parameters.values())
        if not any(p.kind is Parameter.VAR_POSITIONAL for p in parameters):
            positional = [p for p in parameters if p.kind in POSITIONAL]
            if len(positional) != self._arguments[event]:
                raise InvalidHandlerError(
                    f"{handler.__name__} does not match the signature of {event.__name__}."
                )

        self._listeners[event].append(handler)

    def unsubscribe(self, event: Union[Callable, BoundEvent], handler: Callable):
        """
        Removes a handler from an event.

        :raises NoSuchListenerError: If the handler is not subscribed to the event.
        """
        event = self._resolve(event)
        try:
            self._listeners[event].remove(handler)
        except (KeyError, ValueError):
            raise NoSuchListenerError(f"{handler.__name__} is not subscribed to {event.__name__}.")

    def emit(self, event: Union[Callable, BoundEvent], *args, **kwargs):
        """Calls every handler subscribed to the event with the given arguments."""
        event = self._resolve(event)
        if event not in self._listeners:
            raise NoSuchEventError(f"{event.__name__} is not registered on this hub.")

        for handler in list(self._listeners[event]):
            handler(*args, **kwargs)

    @staticmethod
    def _resolve(event: Union[Callable, BoundEvent]) -> Callable:
        return event.event if isinstance(event, BoundEvent) else event

    def __contains__(self, item):
        if isinstance(item, type) and issubclass(item, EventList):
            return item in self._event_lists
        return self._resolve(item) in self._listeners

    def __getattr__(self, name) -> BoundEvent:
        if name.startswith("_"):
            raise AttributeError(name)

        for event in self._listeners:
            if event.__name__ == name:
                return BoundEvent(self, event)

        raise NoSuchEventError(f"{name} is not registered on this hub.")

    def __setattr__(self, name, value):
        # "hub.event += handler" assigns the bound event back to the hub
        if isinstance(value, BoundEvent) and value.hub is self:
            return
        super().__setattr__(name, value)
