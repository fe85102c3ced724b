"""
Configuration settings for Spotify Code Generator
Loads user-specific settings from the environment (or a .env file)
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Spotify API Credentials (get from https://developer.spotify.com/dashboard)
# Placeholders are rejected by the command line
CLIENT_ID_PLACEHOLDER = 'YOUR_CLIENT_ID_HERE'
CLIENT_SECRET_PLACEHOLDER = 'YOUR_CLIENT_SECRET_HERE'

SPOTIPY_CLIENT_ID = os.getenv('SPOTIPY_CLIENT_ID', CLIENT_ID_PLACEHOLDER)
SPOTIPY_CLIENT_SECRET = os.getenv('SPOTIPY_CLIENT_SECRET', CLIENT_SECRET_PLACEHOLDER)

# Default Spotify URI to render when none is given on the command line
DEFAULT_URI = os.getenv('SPOTIFY_CODE_URI')

# Endpoints (the token and album endpoints are owned by spotipy)
SPOTIFY_CODES_URL = 'https://www.spotifycodes.com/downloadCode.php?uri={format}'

# Spotify Code settings
DEFAULT_BAR_COLOR = 'white'
BAR_COLORS = ('white', 'black')
DEFAULT_FORMAT = 'png'
SUPPORTED_FORMATS = ('png', 'jpeg')  # svg is offered by the service but is not a raster image
DEFAULT_CODE_SIZE = 640

# HTTP settings
REQUEST_TIMEOUT = 10  # Seconds
