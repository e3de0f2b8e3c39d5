"""cargo-links API layer."""
