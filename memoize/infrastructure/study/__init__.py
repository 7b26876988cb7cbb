"""Study infrastructure layer."""
