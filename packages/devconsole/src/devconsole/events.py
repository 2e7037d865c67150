"""
Console Event System

A small in-process pub/sub bus used to announce console activity:
- console_execute: a non-empty line was submitted
- console_logmessage: a line was appended to the log

Events carry only their topic and a timestamp. Subscribers are plain
callables invoked synchronously on the publishing thread.
"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Dict, List, Optional, Set


logger = logging.getLogger(__name__)


class ConsoleTopic(str, Enum):
    """Notification tags published by the console."""

    EXECUTE = "console_execute"
    LOG_MESSAGE = "console_logmessage"


@dataclass(frozen=True)
class ConsoleEvent:
    """A payload-free console notification."""

    topic: ConsoleTopic
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


EventCallback = Callable[[ConsoleEvent], None]


@dataclass
class Subscription:
    """Represents a subscription to console events."""

    subscription_id: str
    callback: EventCallback
    topics: Set[ConsoleTopic]  # Empty set means all topics


class EventBus:
    """
    Synchronous event bus.

    A failing subscriber is logged and skipped; it never stops delivery to
    the others or propagates to the publisher.
    """

    def __init__(self):
        self._subscriptions: Dict[str, Subscription] = {}
        self._next_subscription_id = 0
        self._event_counts: Dict[ConsoleTopic, int] = {topic: 0 for topic in ConsoleTopic}
        self._lock = threading.RLock()

    def subscribe(
        self,
        callback: EventCallback,
        topics: Optional[List[ConsoleTopic]] = None,
    ) -> str:
        """
        Subscribe to events.

        Args:
            callback: Called with each matching event
            topics: Topics to receive, None for all

        Returns:
            subscription_id: Unique ID for this subscription
        """
        with self._lock:
            self._next_subscription_id += 1
            sub_id = f"sub_{self._next_subscription_id}"
            self._subscriptions[sub_id] = Subscription(
                subscription_id=sub_id,
                callback=callback,
                topics=set(topics) if topics else set(),
            )

        logger.debug(f"Created subscription {sub_id}")
        return sub_id

    def unsubscribe(self, subscription_id: str) -> bool:
        """Remove a subscription."""
        with self._lock:
            if subscription_id not in self._subscriptions:
                return False
            del self._subscriptions[subscription_id]

        logger.debug(f"Removed subscription {subscription_id}")
        return True

    def publish(self, topic: ConsoleTopic) -> int:
        """
        Publish an event to all matching subscribers.

        Returns the number of subscribers notified.
        """
        event = ConsoleEvent(topic=topic)
        with self._lock:
            self._event_counts[topic] += 1
            subscriptions = list(self._subscriptions.values())

        notified = 0
        for sub in subscriptions:
            if sub.topics and topic not in sub.topics:
                continue
            try:
                sub.callback(event)
                notified += 1
            except Exception as e:
                logger.error(
                    f"Subscriber {sub.subscription_id} failed on {topic.value}: {e}"
                )

        return notified

    def event_count(self, topic: ConsoleTopic) -> int:
        """Number of events published on a topic."""
        with self._lock:
            return self._event_counts[topic]
