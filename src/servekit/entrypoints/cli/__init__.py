"""servekit command-line interface."""
