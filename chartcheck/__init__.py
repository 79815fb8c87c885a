"""chartcheck - report whether Argo CD Helm applications pin the latest chart."""

__version__ = "0.1.0"
