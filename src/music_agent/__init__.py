"""music-agent: review MP3 tags with a language model and apply its suggestions."""

__version__ = "0.1.0"
