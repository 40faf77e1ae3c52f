# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKS_APP_NAME": "Name shown in the board header (default: tasks).",
    "TASKS_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    "TASKS_DATA_DIR": "Directory for task_tracker.log (default: .local/tasks). Tasks are never saved.",
    # Presentation
    "TASKS_DEFAULT_PRIORITY": "Priority used by /add when none is given: low|medium|high (default: low).",
    "TASKS_DEADLINE_FORMAT": "strftime format for deadlines in the board (default: %Y-%m-%d %H:%M).",
    "TASKS_CONSOLE_COLOR": "Color priorities with ANSI codes (true/false, default: true).",
}
