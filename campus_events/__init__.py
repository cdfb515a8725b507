"""Campus events registration service."""
