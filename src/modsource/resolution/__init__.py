"""Source location resolution for modules."""
