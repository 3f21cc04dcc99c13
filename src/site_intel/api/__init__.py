"""HTTP API for site-intel."""
