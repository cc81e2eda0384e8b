"""
Utility functions module.

Time Semantics:
- Trade timestamps are timezone-aware UTC datetimes taken when a trade is recorded
- Windowed calculations take an explicit reference instant ("now")
- Wall-clock time is only read when no reference instant is supplied
"""
