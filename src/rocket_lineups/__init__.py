# ABOUTME: Team GO Rocket invasion lineup extraction from public guide pages
# ABOUTME: Builds the normalized rocketInvasions JSON dataset

__version__ = "0.1.0"
