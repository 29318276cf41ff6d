"""Baby accessories shop API."""
