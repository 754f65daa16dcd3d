#!/usr/bin/env python3
"""
Minecraft server launcher (dockerized itzg/minecraft-server)
"""

import sys
from mc_launcher.cli import main

if __name__ == "__main__":
    sys.exit(main())
