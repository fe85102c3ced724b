"""
Error types for Spotify Code Generator
Every failure in the pipeline is raised as one of these and handled once,
at the command line
"""


class SpotifyCodeError(Exception):
    """Base class for all pipeline errors"""

    exit_code = 1


class InvalidURIError(SpotifyCodeError):
    """Spotify URI is not of the form scheme:type:id"""

    exit_code = 2


class UnsupportedResourceError(SpotifyCodeError):
    """Spotify URI names a resource type we cannot resolve to a cover"""

    exit_code = 2


class UnsupportedFormatError(SpotifyCodeError):
    """Requested code image format cannot be decoded as a raster image"""

    exit_code = 2


class TransportError(SpotifyCodeError):
    """Network failure or non-success HTTP status"""


class AuthenticationError(TransportError):
    """Client credentials could not be exchanged for an access token"""


class DecodeError(SpotifyCodeError):
    """Response body could not be decoded as JSON or as an image"""
