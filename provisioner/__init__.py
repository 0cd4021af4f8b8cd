"""mps-provisioner: provisions projects, environments, applications and their repositories."""

__version__ = "0.1.0"
