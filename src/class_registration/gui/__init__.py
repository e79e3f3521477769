"""PySide6 presentation layer for the registration form."""
