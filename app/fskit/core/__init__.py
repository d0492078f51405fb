"""Configuration, paths and theming for fskit."""
