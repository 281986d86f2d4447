# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo-app).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Connectors
    "TODO_CONSOLE_ENABLED": "Run the console REPL (true/false, default: true).",
    # Paths
    "TODO_DATA_DIR": (
        "Local data directory (default: platform data dir, e.g. ~/.local/share/todo-app)."
    ),
    "TODO_DB_PATH": "SQLite database file (default: <data_dir>/todo.db).",
    "TODO_LOG_DIR": "Directory for todo.log (default: <data_dir>/logs).",
}
