"""Configuration, logging setup and seed data loading."""
