"""Core quiz logic: state machine, scoring and result analytics."""
