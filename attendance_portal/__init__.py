"""
Attendance Portal client.

Async client for the attendance/leave/reporting backend: session handling,
authenticated API access, cached feature stores and route guards.
"""

__version__ = "1.0.0"
