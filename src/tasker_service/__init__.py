"""Project and task tracker service."""
