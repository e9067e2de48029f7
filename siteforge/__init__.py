"""SiteForge: AI website mockup generation with streamed delivery."""

__version__ = "0.1.0"
