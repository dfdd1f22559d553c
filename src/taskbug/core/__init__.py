# src/taskbug/core/__init__.py
