"""Deploykit - deployer account provisioning and network profile resolution."""

__version__ = "0.1.0"
