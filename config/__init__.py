"""Configuration package for the zoo intake application.

Provides layered configuration (defaults, config/zoo.json, environment,
command line) with validation, plus a facade for flat access.

Main components:
- config.py: Configuration dataclasses and loader
- service.py: Facade for simplified configuration access
"""
