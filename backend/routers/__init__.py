"""API routers for the Mr. Smartyplants backend."""
