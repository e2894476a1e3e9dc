"""Download OpenVPN profiles listed on a web page, filtered by protocol."""

__version__ = "0.1.0"
__all__ = ["__version__"]