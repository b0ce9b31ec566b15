"""
Version 1 of the API.

Breaking changes to the itinerary endpoints go into a new version
subpackage.
"""
