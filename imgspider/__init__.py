"""Crawl a website's navigation links and download the images its pages reference."""

__version__ = "0.1.0"
__all__ = ["__version__"]