"""bptrack-server: blood pressure tracking backend for personal and family use."""

__version__ = "0.1.0"
