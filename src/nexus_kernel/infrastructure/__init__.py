"""Infrastructure adapters: persistence, messaging, observability."""
