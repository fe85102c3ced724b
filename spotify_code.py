#!/usr/bin/env python3
"""
Spotify Code Generator - Album Art + Spotify Code
Downloads an album's cover art and a matching Spotify Code colored with the
cover's dominant color, then saves them stacked as a single PNG.

Version: 1.0
License: MIT
"""

import os
import sys
import argparse

from spotifycode.config import settings
from spotifycode.core.generator import SpotifyCodeGenerator
from spotifycode.errors import SpotifyCodeError, UnsupportedResourceError
from spotifycode.spotify.uri import ResourceType, normalize_uri, parse_spotify_uri


def build_parser():
    parser = argparse.ArgumentParser(
        description='Spotify Code Generator - cover art stacked on its Spotify Code',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Credentials from the environment (or a .env file):
  export SPOTIPY_CLIENT_ID=... SPOTIPY_CLIENT_SECRET=...
  python3 spotify_code.py spotify:album:6BzxX6zkDsYKFJ04ziU5xQ -o beyonce

  # From a share link, with black bars:
  python3 spotify_code.py https://open.spotify.com/album/6BzxX6zkDsYKFJ04ziU5xQ --bar-color black

  # Fixed background color instead of the cover's dominant color:
  python3 spotify_code.py spotify:album:6BzxX6zkDsYKFJ04ziU5xQ --color '#1DB954'
        """
    )
    parser.add_argument(
        'uri',
        nargs='?',
        type=str,
        help='Spotify album URI or URL (e.g., spotify:album:... or https://open.spotify.com/album/...)'
    )
    parser.add_argument(
        '--uri', '-u',
        type=str,
        dest='uri_keyword',
        help='Spotify album URI or URL (alternative to positional argument)'
    )
    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output file name without extension (default: the album ID)'
    )
    parser.add_argument(
        '--client-id',
        default=settings.SPOTIPY_CLIENT_ID,
        help='Spotify client ID (default: $SPOTIPY_CLIENT_ID)'
    )
    parser.add_argument(
        '--client-secret',
        default=settings.SPOTIPY_CLIENT_SECRET,
        help='Spotify client secret (default: $SPOTIPY_CLIENT_SECRET)'
    )
    parser.add_argument(
        '--color',
        type=str,
        help='Background color as hex (default: dominant color of the cover)'
    )
    parser.add_argument(
        '--bar-color',
        choices=settings.BAR_COLORS,
        default=settings.DEFAULT_BAR_COLOR,
        help='Color of the code bars (default: %(default)s)'
    )
    parser.add_argument(
        '--format',
        choices=settings.SUPPORTED_FORMATS,
        default=settings.DEFAULT_FORMAT,
        dest='image_format',
        help='Format to request the code in (default: %(default)s)'
    )
    parser.add_argument(
        '--show', '-s',
        action='store_true',
        help='Display the image after saving it (requires a display)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose output (token, URLs and dominant color)'
    )
    return parser


def credentials_configured(client_id, client_secret):
    """Check that real credentials (not placeholders) were supplied"""
    return bool(
        client_id and client_id != settings.CLIENT_ID_PLACEHOLDER and
        client_secret and client_secret != settings.CLIENT_SECRET_PLACEHOLDER
    )


def show_image(image, filename):
    if 'DISPLAY' in os.environ:
        image.show()
        print(f"  → Displayed {filename}")
    else:
        print("  ⚠ Cannot display: DISPLAY not set")
        print(f"  → View with: xdg-open {filename}")


def main(argv=None):
    """Run the generator; returns the process exit code"""
    parser = build_parser()
    args = parser.parse_args(argv)

    uri = args.uri or args.uri_keyword or settings.DEFAULT_URI
    if not uri:
        print("❌ No Spotify URI given")
        print("  python3 spotify_code.py spotify:album:6BzxX6zkDsYKFJ04ziU5xQ")
        return 2
    uri = normalize_uri(uri)

    if not credentials_configured(args.client_id, args.client_secret):
        print("\n❌ ERROR: Spotify API credentials not configured!")
        print("\nSet them in the environment or in a .env file:")
        print("1. Go to: https://developer.spotify.com/dashboard")
        print("2. Create an app and get your Client ID and Secret")
        print("3. export SPOTIPY_CLIENT_ID=... SPOTIPY_CLIENT_SECRET=...")
        print("   (or pass --client-id and --client-secret)\n")
        return 1

    try:
        spotify_uri = parse_spotify_uri(uri)
        if spotify_uri.resource_type is not ResourceType.ALBUM:
            raise UnsupportedResourceError(
                f"No implemented behavior for content type {spotify_uri.resource_type.value!r}"
            )
        generator = SpotifyCodeGenerator(args.client_id, args.client_secret, verbose=args.verbose)
        print(f"Generating Spotify Code for: {uri}")
        image = generator.get_code(
            uri,
            color=args.color,
            bar_color=args.bar_color,
            image_format=args.image_format,
        )
    except SpotifyCodeError as e:
        print(f"❌ {e}")
        return e.exit_code

    basename = args.output or spotify_uri.resource_id
    filename = generator.save_image(image, basename)
    if filename is None:
        return 1

    print(f"✓ Created: {filename} ({image.width}x{image.height}, color {generator.last_color})")

    if args.show:
        show_image(image, filename)
    return 0


if __name__ == "__main__":
    sys.exit(main())
