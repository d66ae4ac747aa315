"""
HTML rendering.
"""

from listshare.web.renderer import Renderer

__all__ = ["Renderer"]
