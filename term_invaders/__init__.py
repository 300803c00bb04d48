# Term Invaders Source Package
"""
Term Invaders - Space Invaders in the terminal.

Modules:
- core: Abstract interfaces for games and renderers
- games: Game implementations and the game registry
- play: Terminal input, match driver and command-line entry point
- visualization: Live terminal display
- utils: Configuration and logging
"""

__version__ = "1.0.0"
