"""Install and uninstall Claude skills into personal or project skill directories."""

__version__ = "0.1.0"
