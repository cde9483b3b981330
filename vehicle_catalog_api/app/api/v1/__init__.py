"""Version 1 of the Vehicle Catalog API."""
