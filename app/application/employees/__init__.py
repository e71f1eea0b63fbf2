"""Use cases for the employees bounded context."""
