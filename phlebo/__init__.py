"""
Regional formatting and map clustering for the blood-collection booking platform.

Subpackages:
- phlebo.regions: region registry plus currency, date, phone, address and tax formatting
- phlebo.maps: provider marker clustering and spiderfy layout
- phlebo.core: settings, errors and shared utilities
"""

__version__ = "1.0.0"
