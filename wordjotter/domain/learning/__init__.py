"""
Learning bounded context - Domain layer.

This context handles vocabulary practice:
- Vocabulary items and their mastery state
- Review interval table
- Spaced-repetition scheduling of reviews

Aggregates:
- VocabularyItem: A saved word together with its mastery state
"""
