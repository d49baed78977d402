"""Bootstrap wiring for configuration, logging, database and services."""
