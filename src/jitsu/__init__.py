"""Panda Jitsu: a two-player reflex card game built on pygame."""

__version__ = "0.3.0"
