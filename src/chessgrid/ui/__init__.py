"""Presentation layer — PyQt6 board, window and application bootstrap."""
