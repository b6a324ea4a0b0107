"""Backend package for the Mr. Smartyplants game API.

This package provides the FastAPI web server that lets any client
(browser, desktop game engine) drive game sessions over HTTP.
"""

__version__ = "0.1.0"
