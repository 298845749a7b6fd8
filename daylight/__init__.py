"""
Daylight - light/dark mode synchronization by sunrise and sunset

This is the root package for daylight-sync, which decides whether the desktop
should be in light or dark mode and pushes that decision to config files and
running editor sessions.

Core modules:
- solar: Sunrise/sunset lookup and day/night classification
- location_resolver: Approximate coordinate lookup from network context
- state_store: Last-applied state file (~/.daylight.vim)
- theme_rewriter: Color scheme anchor rewriting in the terminal config
- sessions: Background/theme updates for running Neovim sessions
- orchestrator: Ties the pieces together for a single run
"""

__version__ = "0.3.0"
