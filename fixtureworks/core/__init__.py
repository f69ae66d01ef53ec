"""Cross-cutting infrastructure: configuration, logging, exceptions, protocols."""
