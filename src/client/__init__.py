"""Client — command-line exerciser for the Fibonacci device."""
