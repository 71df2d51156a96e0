"""Infrastructure: search backend formatters and their wire protocols."""
