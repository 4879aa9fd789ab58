"""Ice runner: a sliding-ice puzzle on a 5×5 board."""
