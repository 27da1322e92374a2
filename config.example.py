# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "PTASKS_APP_NAME": "App display name (default: personal-tasks).",
    "PTASKS_LOG_LEVEL": "Console logging level (default: INFO).",
    "PTASKS_CONSOLE_LOG": "Mirror logs to stderr (true/false, default: true).",
    # Presentation
    "PTASKS_LOCALE": "Language of user messages and priority labels: en | vi (default: en).",
    # Paths
    "PTASKS_DATA_DIR": "Local data directory for logs (default: .local/personal-tasks).",
    "PTASKS_TASKS_DB_PATH": "Task JSON document (default: tasks_database.json).",
}
