"""Four-function keypad calculator (PySide6)."""
