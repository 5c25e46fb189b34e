"""Services operating on installations."""
