"""Pure score model: configuration and the score/ element tree."""
