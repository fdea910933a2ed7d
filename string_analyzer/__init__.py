"""String analysis service with structured and natural-language filtering."""
