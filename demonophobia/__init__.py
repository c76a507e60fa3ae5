"""A small pygame side-scroller: a hero with a movement state machine in a walled room."""

__version__ = "0.1.0"