"""AI gateway client construction."""
