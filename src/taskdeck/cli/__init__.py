# src/taskdeck/cli/__init__.py
