"""Protocol front ends: UCI over stdin/stdout and a REST API."""
