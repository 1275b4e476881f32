"""Pipeline orchestration, artifacts and errors."""
