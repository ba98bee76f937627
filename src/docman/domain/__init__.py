"""Domain layer — entry models, errors, ports, and pure services."""
