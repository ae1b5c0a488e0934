"""Meshify - terminal dashboard for Kubernetes service meshes."""

__version__ = "0.1.0"
