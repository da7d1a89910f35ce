"""
Task Bank - Exam Exercise Catalogue

Manages exam-style exercise items (tasks) together with their file
attachments and scoring metadata, behind a repository port so that
storage technology stays swappable.

Core Rules:
- A task's maximum points resolve override -> answer schema -> default
- Partial updates change only the fields they carry
- Soft validation warns, it never blocks a write
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
