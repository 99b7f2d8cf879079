"""UI module."""

from .base import DisplayPort, InputPort
from .frame import Frame
from .terminal import ReadcharInput, RichDisplay

__all__ = [
    "DisplayPort",
    "Frame",
    "InputPort",
    "ReadcharInput",
    "RichDisplay",
]
