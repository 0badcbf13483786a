"""modsweep - find and remove node_modules directories you no longer need."""

__version__ = "0.1.110"
