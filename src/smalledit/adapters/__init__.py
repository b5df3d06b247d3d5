"""Host UI adapters for the editor controller."""
