"""Spotify Code Generator - album cover art stacked on its Spotify Code"""

from .core.generator import SpotifyCodeGenerator
from .errors import SpotifyCodeError

__all__ = ['SpotifyCodeGenerator', 'SpotifyCodeError']
