"""Text maze inside a 4D hypercube with time-shifting traps."""
