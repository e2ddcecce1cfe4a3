"""atlas-unpacker: split packed texture atlases back into sprite and nine-patch images."""

__version__ = "0.1.0"
