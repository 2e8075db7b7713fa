"""Product catalog service.

REST API for products, price lists, per-list prices and catalog settings,
with a tab-separated product import that reconciles rows against existing
products.
"""

__version__ = "0.1.0"
