"""cardwise: spaced-repetition scheduling for topic flashcards."""
