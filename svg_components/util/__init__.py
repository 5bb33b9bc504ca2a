"""
Utility functions and helpers.

Modules:
- files: Text reading and atomic writes
- progress: rich progress bars and summaries
- templates: Jinja2 template loading with override directories
"""
