# src/taskbug/connectors/__init__.py
