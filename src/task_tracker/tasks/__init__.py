"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus)
- task_codec.py: store file encoder / decoder
- task_list.py: in-memory collection with a dirty flag
- task_store.py: reads and rewrites the store file
"""
