"""SynthData: projects, datasets and synthetic-data generation records."""

__version__ = "1.0.0"
