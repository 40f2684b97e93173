"""HTTP routes and error handling for the zone lighting service."""
