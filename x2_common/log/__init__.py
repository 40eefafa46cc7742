"""Environment-driven debug and error loggers.

- builder: Log line assembly from configured fragments
- debug: Per-section debug logger registry
- error: Shared, always-active error logger
"""
