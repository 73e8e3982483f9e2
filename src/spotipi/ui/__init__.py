"""User-facing interfaces (HTTP and command line)."""
