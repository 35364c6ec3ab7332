"""Turn engine: board, units, choices, players and the game loop."""
