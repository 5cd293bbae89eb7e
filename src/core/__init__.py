"""Core module for the resume analyzer."""


# Lazy imports to avoid circular dependencies
def get_container():
    """Get container instance with lazy import."""
    from src.core.container import get_container as _get_container

    return _get_container()


__all__ = ["get_container"]
