"""Attendance use cases."""

from .mark_attendance import MarkAttendanceRequest, MarkAttendanceUseCase

__all__ = ["MarkAttendanceRequest", "MarkAttendanceUseCase"]
