"""Aquarium simulation package.

The simulation core (entities, steering, frame pipeline) is pure Python and
has no pygame dependency. pygame is only imported by the rendering, audio
and application modules.
"""

__version__ = "0.1.0"
