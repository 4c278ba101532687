"""Front ends that draw snapshots and feed commands into the game loop."""
