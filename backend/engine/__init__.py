"""Solar system sizing engine: pure formulas, no I/O."""
