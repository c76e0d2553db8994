"""Domain layer — models, ports, and exceptions. No I/O, no parsing."""
