# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKDECK_APP_NAME": "App display name (default: taskdeck).",
    "TASKDECK_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASKDECK_FILE_LOGGING": "Write <log_dir>/taskdeck.log (true/false, default: true).",
    # Paths
    "TASKDECK_DATA_DIR": (
        "Data directory (default: $XDG_DATA_HOME/taskdeck, ~/Library/Application Support/taskdeck "
        "or %APPDATA%\\taskdeck)."
    ),
    "TASKDECK_TASKS_PATH": "Task file (default: <data_dir>/tasks.json).",
    "TASKDECK_LOG_DIR": "Log directory (default: <data_dir>).",
}
