"""Page renderers, one per quiz phase."""
