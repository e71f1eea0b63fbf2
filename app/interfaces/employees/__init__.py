"""HTTP interface for the employees bounded context."""
