"""Backend package for the Training Log API."""
