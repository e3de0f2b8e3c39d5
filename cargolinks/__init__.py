"""cargo-links: check the links in your crate's documentation."""
