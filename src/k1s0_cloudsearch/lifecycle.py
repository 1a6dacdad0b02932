"""Explicit registration of index sync policies per record type."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from .sync import IndexSyncPolicy


class LifecycleEvent(StrEnum):
    """Record lifecycle events, fired after the store commits the change."""

    CREATE = "create"
    UPDATE = "update"
    DESTROY = "destroy"


class LifecycleNotifier:
    """Routes record lifecycle events to the policy registered for the record's type."""

    def __init__(self) -> None:
        self._policies: dict[type, IndexSyncPolicy] = {}

    def register(self, record_type: type, policy: IndexSyncPolicy) -> None:
        self._policies[record_type] = policy

    def unregister(self, record_type: type) -> None:
        self._policies.pop(record_type, None)

    def policy_for(self, record_type: type) -> IndexSyncPolicy | None:
        """Policy of the nearest registered class in the MRO of `record_type`."""
        for klass in record_type.__mro__:
            policy = self._policies.get(klass)
            if policy is not None:
                return policy
        return None

    def notify(self, event: LifecycleEvent, record: Any) -> None:
        """Invoke the matching hook. Records of unregistered types are ignored."""
        policy = self.policy_for(type(record))
        if policy is None:
            return
        if event == LifecycleEvent.CREATE:
            policy.on_create(record)
        elif event == LifecycleEvent.UPDATE:
            policy.on_update(record)
        elif event == LifecycleEvent.DESTROY:
            policy.on_destroy(record)
        else:
            raise ValueError(f"unknown lifecycle event: {event!r}")
