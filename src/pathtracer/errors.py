"""Exceptions raised while building or rendering a scene."""


class PathTracerError(Exception):
    """Base class for path tracer errors."""


class TextureLoadError(PathTracerError):
    """An image texture could not be opened or decoded."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"can't load texture image file {self.path}: {reason}")


class SceneError(PathTracerError):
    """A scene could not be assembled."""
