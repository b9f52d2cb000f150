"""
Observer protocol - how views learn that the world changed
"""

import logging

from utils.exceptions import ObserverReentryError

logger = logging.getLogger(__name__)


class WorldObserver:
    """
    Base class for views

    on_world_changed receives the live World, not a copy, and must treat
    it as read-only. Plain callables taking the world work as observers too.
    The base class itself is interface-only and is refused at registration.
    """
    def on_world_changed(self, world):
        raise NotImplementedError


def _callback_of(observer):
    if isinstance(observer, WorldObserver):
        if type(observer).on_world_changed is WorldObserver.on_world_changed:
            raise TypeError(f"{type(observer).__name__} does not override on_world_changed")
        return observer.on_world_changed
    handler = getattr(observer, "on_world_changed", None)
    if handler is not None:
        return handler
    if callable(observer):
        return observer
    raise TypeError(f"{observer!r} is neither a WorldObserver nor callable")


class ObserverRegistry:
    """
    Registered observers, notified synchronously in registration order
    """
    def __init__(self):
        self._observers = []
        self.notifying = False

    def register(self, observer):
        """Add an observer; returns it as the handle for unregister"""
        _callback_of(observer)
        self._observers.append(observer)
        return observer

    def unregister(self, observer):
        """Remove an observer; unknown handles are ignored"""
        if observer in self._observers:
            self._observers.remove(observer)

    def ensure_not_notifying(self, operation):
        """
        Raises:
            ObserverReentryError: if called from inside a notification
        """
        if self.notifying:
            raise ObserverReentryError(
                f"{operation}() called from an observer callback"
            )

    def notify(self, world):
        """Deliver world to every observer"""
        self.ensure_not_notifying("notify")
        self.notifying = True
        try:
            for observer in list(self._observers):
                _callback_of(observer)(world)
        finally:
            self.notifying = False

    def notify_one(self, observer, world):
        self.ensure_not_notifying("notify")
        self.notifying = True
        try:
            _callback_of(observer)(world)
        finally:
            self.notifying = False

    def __len__(self):
        return len(self._observers)

    def __contains__(self, observer):
        return observer in self._observers

    def __repr__(self):
        return f"ObserverRegistry(observers={len(self._observers)})"
