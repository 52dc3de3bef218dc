"""Core of porkers: domain models, configuration, errors and contracts."""
