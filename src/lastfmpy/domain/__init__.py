"""Domain layer: Last.fm value objects and the ports adapters implement."""
