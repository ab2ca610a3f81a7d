"""Rotation, Vigenère and XOR ciphers, Morse and Polybius encodings, and SHA-256."""

__all__ = ["morse_code", "polybius", "rotation", "sha256", "vigenere", "xor"]