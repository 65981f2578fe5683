from .fingerprint import decode, encode

__all__ = ["encode", "decode"]
