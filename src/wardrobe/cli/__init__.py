"""Command line interface for the wardrobe configurator."""
