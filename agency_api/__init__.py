"""Account and profile records for a sports agency, served over FastAPI."""
