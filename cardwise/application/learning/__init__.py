"""
Learning bounded context - Application layer.

Contains the spaced repetition core:
- Services: identity resolution, due-set aggregation, bundle cache
- Commands: Create, Translate, Delete flashcards, Record attempts
- Queries: Get topic bundle, Get due flashcards
"""
