"""Gym Attendance package.

The package is organized by feature modules (checkins, members, tokens,
activities). Every service is a pure computation over records handed in by
the caller plus an injected clock; storage and presentation live elsewhere.
"""
