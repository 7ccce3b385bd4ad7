"""Core configuration for fscleaner: XDG paths and color theme."""
