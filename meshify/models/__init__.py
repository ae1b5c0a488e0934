"""Data models for Meshify."""
