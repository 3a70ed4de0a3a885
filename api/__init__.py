"""HTTP surface for the board engine."""
