"""A display-free 2D game framework: scenes, objects, colliders, animations, keyboard states and deferred events."""

__version__ = "0.1.0"