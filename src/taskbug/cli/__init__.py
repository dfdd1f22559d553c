# src/taskbug/cli/__init__.py
