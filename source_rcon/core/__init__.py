"""RCON protocol engine: codec, framing, authentication and command channel."""
