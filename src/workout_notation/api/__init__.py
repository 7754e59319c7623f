"""HTTP adapter for the workout notation library."""
