"""Domain constants and the error taxonomy."""
