"""2D game utilities: vectors, rectangles, colours, easing curves, tweens, a quadtree and a camera."""

__version__ = "0.1.0"