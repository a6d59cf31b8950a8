from .errors import persistence_error_handler, validation_exception_handler

__all__ = ["persistence_error_handler", "validation_exception_handler"]
