"""Static single-page career showcase built from staged YAML/JSON data."""
