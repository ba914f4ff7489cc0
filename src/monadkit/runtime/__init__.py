"""Runtime support: observability."""
