from .surface import RenderSurface, PygameSurface

__all__ = [
    "RenderSurface",
    "PygameSurface",
]
