"""HTTP Basic access policy for the API."""
