"""Post-build web font optimizer for static sites."""
