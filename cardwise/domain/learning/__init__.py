"""
Learning bounded context - Domain layer.

This context handles spaced repetition of flashcards:
- Flashcards and their language variants
- Review attempts and the scheduling state they produce
- The SM-2 style scheduler

Entities:
- Flashcard: a question/answer pair in one language
- TranslationLink: maps a language variant to its base flashcard
- Attempt: an immutable rating event against a base flashcard
"""
