"""Configuration package for the Smartyplants game.

Rule tuning lives in ``garden``; service defaults live in ``server``.
"""
