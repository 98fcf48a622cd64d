"""API subpackage - FastAPI app for budget calculations."""
