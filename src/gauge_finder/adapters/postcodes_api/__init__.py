"""postcodes.io adapters."""

from gauge_finder.adapters.postcodes_api.postcode_geocoder import PostcodeGeocoder

__all__ = ["PostcodeGeocoder"]
