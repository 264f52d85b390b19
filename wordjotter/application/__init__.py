"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains use cases that represent the operations available
to external actors, and protocols for the external dependencies they need.
"""
