"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, SortSpec, Section)
- task_store.py: in-memory, insertion-ordered collection + mutators
- task_sorting.py: ordering of the active list and sort toggling
- task_api.py: high-level operations and derived views used by the CLI
"""
