"""mk - crash reporting and environment discovery for the cluster CLI."""

__version__ = "0.1.0"
