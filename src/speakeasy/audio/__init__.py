"""Audio finishing for speakeasy."""

from .finisher import AudioFinisher, create_safe_filename

__all__ = ["AudioFinisher", "create_safe_filename"]
