# src/taskbug/tasks/__init__.py
