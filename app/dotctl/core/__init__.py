"""Core configuration, detection, and orchestration for dotctl."""
