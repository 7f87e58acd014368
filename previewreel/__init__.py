"""PreviewReel — shuffled random-clip preview playlists for a folder of videos."""

__version__ = "0.1.0"
