"""
Learning bounded context - Application layer.

Contains use cases for vocabulary practice:
- Review: select due words, record review outcomes
- Words: save, list, delete words and summarize the notebook
"""
