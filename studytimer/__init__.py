"""Timer, study records, flashcards, settings, tabs, calculator and terminal for a study companion."""

__version__ = "0.1.0"