"""Changed-file collection from version control."""
