"""WordJotter: a vocabulary notebook with spaced-repetition review."""
