"""
mc_launcher package
-------------------
Local setup helper for a dockerized Minecraft server.
Collects launch parameters (game version, mod loader, EULA), remembers them
in a flat args file and starts the itzg/minecraft-server image via docker.
"""

__version__ = "0.1.0"
