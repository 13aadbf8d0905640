from .dialogs import DialogSignals, OverlayDialogs
from .text_renderer import TextRenderer

__all__ = [
    "DialogSignals",
    "OverlayDialogs",
    "TextRenderer",
]
