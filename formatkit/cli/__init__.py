"""Command line entry point: `formatkit list|duration|settings`."""
