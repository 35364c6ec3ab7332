"""Engine-independent building blocks: data types, grid, events and config."""
