from .app import EXIT_FATAL, EXIT_SUCCESS, main

__all__ = ["main", "EXIT_SUCCESS", "EXIT_FATAL"]
