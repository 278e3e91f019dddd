"""Version ordering, fingerprints, and CurseForge and Modrinth file selection for Minecraft modpacks."""

__version__ = "0.1.0"