"""
scoretrace CLI - Command-line interface for timeline rendering.

Usage:
    scoretrace render scores.json -o timeline.html
    scoretrace render scores.yaml --config config/render.yaml
    scoretrace inspect scores.json --width 500
"""

__version__ = "1.0.0"
