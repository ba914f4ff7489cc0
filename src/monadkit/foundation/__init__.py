"""Foundation: errors and configuration shared across monadkit."""
