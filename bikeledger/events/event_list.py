from inspect import getattr_static, signature, Parameter
from typing import Callable, List

from bikeledger.events.exceptions import NoSuchEventError


class EventListMeta(type):

    def __contains__(self, event: Callable):
        """Checks if the event (by name) exists on the events list."""
        event_name = event.__name__
        try:
            return event is getattr(self, event_name)
        except AttributeError:
            return False


class EventList(metaclass=EventListMeta):
    """
    Contains a list of emittable events.
    Events are defined as functions on a subclass
    of the EventList type, and their signatures
    used to determine the "contract" of the event.
    """

    @classmethod
    def events(cls) -> List[Callable]:
        """All the events declared on this list."""
        return [
            getattr(cls, name) for name in dir(cls)
            if not name.startswith("_") and name not in ("events", "arguments") and callable(getattr(cls, name))
        ]

    @classmethod
    def arguments(cls, event: Callable) -> List[Parameter]:
        """
        Gets the arguments an event is emitted with.

        Events declared as plain functions take a leading ``self`` which is not part of the contract.
        """
        if event not in cls:
            raise NoSuchEventError(f"{event.__name__} is not an event on {cls.__name__}.")

        parameters = list(signature(event).parameters.values())
        if not isinstance(getattr_static(cls, event.__name__), staticmethod):
            parameters = parameters[1:]
        return parameters
