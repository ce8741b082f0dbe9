"""Notification delivery adapter."""

from .dispatcher import RecordingNotificationDispatcher, StoredNotificationDispatcher

__all__ = ["StoredNotificationDispatcher", "RecordingNotificationDispatcher"]
