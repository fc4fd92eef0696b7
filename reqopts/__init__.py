"""Request option types, error codes, cancellable future wrappers and interceptor base classes for an HTTP client."""

__version__ = "1.11.1"