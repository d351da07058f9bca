"""Constants shared across pacprune modules."""
