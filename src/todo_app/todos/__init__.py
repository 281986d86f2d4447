"""
Todo subsystem.

Components:
- todo_models.py: data structures (Todo, UpdateResult, DeleteResult)
- errors.py: storage error taxonomy
- todo_store.py: SQLite-backed storage (one table, one connection)
- todo_api.py: the handlers the UI calls (add/toggle/remove/render)
"""
