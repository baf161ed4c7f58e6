"""HTTP helpers shared by authcore blueprints."""
