"""Core business logic module.

Modules:
- models: Question/Option data classes
- question_service: CRUD operations over one database file
"""
